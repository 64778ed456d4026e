"""
Location Service

근무지 CRUD (삭제 제외). 별도의 무결성 규칙이 없어 저장소를 직접 사용합니다.
"""

import logging
from typing import Dict, List

from common.application.result import NOT_FOUND, Err, Ok, Result
from location.application.container import build_location_repository
from location.domain.location import LocationDomain

logger = logging.getLogger(__name__)


class LocationService:
    @staticmethod
    def get_location(location_id: int) -> Result[LocationDomain]:
        location = build_location_repository().get_by_id(location_id)
        if location is None:
            logger.warning(f"Location {location_id} not found")
            return Err(code=NOT_FOUND, message=f"Location {location_id} not found")
        return Ok(location)

    @staticmethod
    def get_all_locations() -> List[LocationDomain]:
        return build_location_repository().list_all()

    @staticmethod
    def create_location(data: Dict) -> LocationDomain:
        """
        근무지 생성

        Args:
            data: title, city, state, country, zip_code
        """
        location = build_location_repository().insert(**data)
        logger.info(f"Created Location {location.id}")
        return location

    @staticmethod
    def update_location(location_id: int, data: Dict) -> Result[LocationDomain]:
        """
        근무지 수정 (전체 교체)
        """
        repo = build_location_repository()
        if not repo.exists(location_id):
            return Err(code=NOT_FOUND, message=f"Location {location_id} not found")

        location = repo.update(LocationDomain(id=location_id, **data))
        logger.info(f"Updated Location {location_id}")
        return Ok(location)

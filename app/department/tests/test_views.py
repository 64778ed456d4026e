"""
Tests for Department Views

부서 API 엔드포인트 테스트 (title 유일성)
"""

import pytest
from department.models import Department
from rest_framework import status


@pytest.mark.django_db
class TestDepartmentViewSet:
    def test_create_department(self, admin_client):
        """부서 생성"""
        # When
        response = admin_client.post(
            "/api/v1/departments/", {"title": "Engineering"}, format="json"
        )

        # Then
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["title"] == "Engineering"
        assert response["Location"].endswith(
            f"/api/v1/departments/{response.data['id']}/"
        )
        assert Department.objects.filter(title="Engineering").exists()

    def test_create_duplicate_title_conflicts(self, admin_client, department):
        """같은 title 부서 생성 시 409"""
        response = admin_client.post(
            "/api/v1/departments/", {"title": department.title}, format="json"
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data["error_code"] == "CONFLICT"
        assert response.data["details"]["title"] == department.title
        assert Department.objects.filter(title=department.title).count() == 1

    def test_title_match_is_case_sensitive(self, admin_client, department):
        response = admin_client.post(
            "/api/v1/departments/", {"title": department.title.upper()}, format="json"
        )

        assert response.status_code == status.HTTP_201_CREATED

    def test_update_to_own_title(self, admin_client, department):
        """자기 title 로 다시 저장해도 충돌 아님"""
        response = admin_client.put(
            f"/api/v1/departments/{department.id}/",
            {"title": department.title},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK

    def test_update_title(self, admin_client, department):
        response = admin_client.put(
            f"/api/v1/departments/{department.id}/",
            {"title": "Platform"},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        department.refresh_from_db()
        assert department.title == "Platform"

    def test_update_to_other_title_conflicts(self, admin_client, department):
        other = Department.objects.create(title="Sales")

        response = admin_client.put(
            f"/api/v1/departments/{other.id}/",
            {"title": department.title},
            format="json",
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        other.refresh_from_db()
        assert other.title == "Sales"

    def test_update_not_found(self, admin_client):
        response = admin_client.put(
            "/api/v1/departments/9999/", {"title": "Nope"}, format="json"
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["error_code"] == "NOT_FOUND"

    def test_list_and_retrieve(self, admin_client, department):
        listed = admin_client.get("/api/v1/departments/")
        detail = admin_client.get(f"/api/v1/departments/{department.id}/")

        assert listed.status_code == status.HTTP_200_OK
        assert [d["title"] for d in listed.data] == ["Engineering"]
        assert detail.data == {"id": department.id, "title": "Engineering"}

    def test_retrieve_not_found(self, admin_client):
        response = admin_client.get("/api/v1/departments/9999/")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_requires_token(self, api_client):
        response = api_client.post(
            "/api/v1/departments/", {"title": "Engineering"}, format="json"
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert not Department.objects.exists()

    def test_blank_title_rejected(self, admin_client):
        response = admin_client.post(
            "/api/v1/departments/", {"title": ""}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

from rest_framework import serializers

# BigAutoField 범위, 이를 넘는 id 는 DB 에 전달하지 않는다
MAX_ID = 2**63 - 1
MAX_PAGE_NO = 2**31 - 1
MAX_PAGE_SIZE = 1000


class JobWriteSerializer(serializers.Serializer):
    """생성/수정 공통 요청 (수정은 전체 교체)."""

    title = serializers.CharField(max_length=255)
    description = serializers.CharField()
    location_id = serializers.IntegerField(min_value=1, max_value=MAX_ID)
    department_id = serializers.IntegerField(min_value=1, max_value=MAX_ID)
    closing_date = serializers.DateTimeField()


class JobListRequestSerializer(serializers.Serializer):
    # page_no / page_size 의 하한은 ListJobsUseCase 가 INVALID_ARGUMENT 로 처리
    q = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=True
    )
    page_no = serializers.IntegerField(required=False, default=1, max_value=MAX_PAGE_NO)
    page_size = serializers.IntegerField(
        required=False, default=10, max_value=MAX_PAGE_SIZE
    )
    location_id = serializers.IntegerField(
        required=False, allow_null=True, min_value=1, max_value=MAX_ID
    )
    department_id = serializers.IntegerField(
        required=False, allow_null=True, min_value=1, max_value=MAX_ID
    )

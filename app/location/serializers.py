from rest_framework import serializers


class LocationSerializer(serializers.Serializer):
    """요청 검증과 응답 직렬화에 함께 사용 (LocationDomain 을 그대로 직렬화)."""

    id = serializers.IntegerField(read_only=True)
    title = serializers.CharField(max_length=255)
    city = serializers.CharField(max_length=255)
    state = serializers.CharField(max_length=255)
    country = serializers.CharField(max_length=255)
    zip = serializers.CharField(source="zip_code", max_length=32)

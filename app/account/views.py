from account.serializers import LoginSerializer, TokenResponseSerializer
from account.services import AccountService
from common.application.result import Err
from common.http import error_response
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView


class LoginView(APIView):
    authentication_classes = []  # 로그인 자체는 토큰 없이 호출
    permission_classes = []

    @extend_schema(
        request=LoginSerializer,
        responses={200: TokenResponseSerializer},
        summary="Admin Login",
        description="Login with the configured admin username/password to get a bearer token.",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = AccountService.login(
            username=serializer.validated_data["username"],
            password=serializer.validated_data["password"],
        )
        if isinstance(result, Err):
            return error_response(result)

        return Response(
            TokenResponseSerializer(result.value).data, status=status.HTTP_200_OK
        )

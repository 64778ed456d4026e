from account.domain.token import ROLE_ADMINISTRATOR
from rest_framework.permissions import SAFE_METHODS, BasePermission


class IsAdministrator(BasePermission):
    """
    토큰에 Administrator 역할이 있어야 합니다.
    """

    def has_permission(self, request, view):
        user = getattr(request, "user", None)
        if not user or not getattr(user, "is_authenticated", False):
            return False
        return ROLE_ADMINISTRATOR in getattr(user, "roles", ())


class IsAdministratorOrReadOnly(IsAdministrator):
    """조회는 누구나, 쓰기는 관리자만."""

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return super().has_permission(request, view)

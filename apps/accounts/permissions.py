"""
Custom permission classes for accounts app.
"""
from rest_framework.permissions import BasePermission

from .models import UserRole


class IsAdminRole(BasePermission):
    """
    Allow access only to users with the admin role (or superusers).

    Usage:
        @permission_classes([IsAuthenticated, IsAdminRole])
        def users(request):
            ...
    """

    message = 'Only administrators can manage user accounts.'

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return user.is_superuser or user.role == UserRole.ADMIN

"""User authentication service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_user(*, phone: str, password: str) -> User:
    """
    Authenticate user with phone number and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    phone = User.objects.normalize_phone(phone)

    try:
        user = (
            User.objects
            .select_for_update()
            .get(phone=phone)
        )
    except User.DoesNotExist:
        logger.warning("Login failed for unknown phone %s", phone)
        raise InvalidCredentialsError("Invalid phone number or password")

    if not user.check_password(password):
        logger.warning("Login failed for %s: wrong password", phone)
        raise InvalidCredentialsError("Invalid phone number or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user

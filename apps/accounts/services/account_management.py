"""Back-office user management service."""

from django.db import transaction
from django.contrib.auth import get_user_model
from uuid import UUID

from .exceptions import DuplicatePhoneError, UserNotFoundError, SelfDeletionError

User = get_user_model()


@transaction.atomic
def create_user_account(
    *,
    phone: str,
    password: str,
    name: str = '',
    username: str = '',
    role: str = 'admin'
) -> User:
    """
    Create a user that can log in with ``phone``.

    Raises:
        DuplicatePhoneError: If the phone number is taken
    """
    phone = User.objects.normalize_phone(phone)

    if User.objects.filter(phone=phone).exists():
        raise DuplicatePhoneError(f"Phone number {phone} is already registered")

    return User.objects.create_user(
        phone=phone,
        password=password,
        name=name,
        username=username or phone,
        role=role,
    )


@transaction.atomic
def delete_user_account(*, user_id: UUID, acting_user) -> None:
    """
    Delete a user account.

    Raises:
        UserNotFoundError: If the user doesn't exist
        SelfDeletionError: If acting_user targets their own account
    """
    if str(user_id) == str(acting_user.id):
        raise SelfDeletionError("You cannot delete your own account")

    deleted, _ = User.objects.filter(id=user_id).delete()
    if not deleted:
        raise UserNotFoundError(f"User with ID {user_id} not found")

"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InvalidCredentialsError,
    InactiveAccountError,
    DuplicatePhoneError,
    UserNotFoundError,
    SelfDeletionError,
)
from .user_authentication import authenticate_user
from .account_management import create_user_account, delete_user_account

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'DuplicatePhoneError',
    'UserNotFoundError',
    'SelfDeletionError',
    # Services
    'authenticate_user',
    'create_user_account',
    'delete_user_account',
]

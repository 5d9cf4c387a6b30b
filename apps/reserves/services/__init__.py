"""
Reserves app services layer.

Allocation accounts, the net-profit allocation calculator, and the
reserve expenditure ledger with its summaries.
"""

from .exceptions import (
    ReservesServiceError,
    InvalidPercentageError,
    InvalidPeriodError,
    InvalidAmountError,
    AllocationAccountNotFoundError,
    DuplicateAccountNameError,
    ExpenditureNotFoundError,
)

from .account_management import (
    DEFAULT_ACCOUNTS,
    list_accounts,
    get_account_by_id,
    create_account,
    update_account,
    delete_account,
    seed_default_accounts,
)

from .allocation import (
    calculate_allocations,
    monthly_share,
)

from .expenditure_management import (
    list_expenditures,
    create_expenditure,
    update_expenditure,
    delete_expenditure,
)

from .expenditure_summary import summarize_expenditures


__all__ = [
    # Exceptions
    'ReservesServiceError',
    'InvalidPercentageError',
    'InvalidPeriodError',
    'InvalidAmountError',
    'AllocationAccountNotFoundError',
    'DuplicateAccountNameError',
    'ExpenditureNotFoundError',

    # Accounts
    'DEFAULT_ACCOUNTS',
    'list_accounts',
    'get_account_by_id',
    'create_account',
    'update_account',
    'delete_account',
    'seed_default_accounts',

    # Allocation
    'calculate_allocations',
    'monthly_share',

    # Expenditures
    'list_expenditures',
    'create_expenditure',
    'update_expenditure',
    'delete_expenditure',
    'summarize_expenditures',
]

"""
Management command to install the default allocation accounts.

Accounts whose name already exists are left untouched, so the command
can be re-run safely after an operator has changed percentages.

Usage:
    python manage.py seed_allocation_accounts
"""

from django.core.management.base import BaseCommand
from apps.reserves.services import DEFAULT_ACCOUNTS, seed_default_accounts


class Command(BaseCommand):
    help = 'Create the default reserve allocation accounts'

    def handle(self, *args, **options):
        created = seed_default_accounts()

        if not created:
            self.stdout.write(
                self.style.SUCCESS('All default allocation accounts already exist.')
            )
            return

        self.stdout.write(
            self.style.SUCCESS(
                f'✓ Created {created} of {len(DEFAULT_ACCOUNTS)} default allocation account(s).'
            )
        )

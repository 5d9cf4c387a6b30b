"""
Management command to rebuild cached stock balances from the ledger.

Recomputes ``current_stock`` for every stock item as the signed sum of
its ledger entries and reports items whose cached value had drifted.

Usage:
    python manage.py rebuild_stock_balances
    python manage.py rebuild_stock_balances --dry-run
"""

from django.core.management.base import BaseCommand
from apps.inventory.models import StockItem
from apps.inventory.services import ledger_balance, rebuild_stock_balance


class Command(BaseCommand):
    help = 'Recompute stock item balances from their ledger entries'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show drifted balances without fixing them',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']

        drifted = []
        for item in StockItem.objects.order_by('name'):
            expected = ledger_balance(item_id=item.id)
            if item.current_stock != expected:
                drifted.append((item, expected))

        if not drifted:
            self.stdout.write(
                self.style.SUCCESS('All stock balances match the ledger.')
            )
            return

        self.stdout.write(f'\nFound {len(drifted)} item(s) with drifted balance:\n')

        for item, expected in drifted:
            self.stdout.write(
                f'  - {item.name} | cached {item.current_stock} | ledger {expected} {item.unit}'
            )

        if dry_run:
            self.stdout.write(
                self.style.WARNING('\n--dry-run mode: No changes made.')
            )
            return

        for item, _ in drifted:
            rebuild_stock_balance(item_id=item.id)

        self.stdout.write(
            self.style.SUCCESS(f'\n✓ Rebuilt {len(drifted)} stock balance(s).')
        )

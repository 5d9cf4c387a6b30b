# Generated manually for bookkeeping app

import uuid
from decimal import Decimal
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Revenue',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('year', models.PositiveIntegerField()),
                ('month', models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(12)])),
                ('amount', models.DecimalField(decimal_places=2, max_digits=15, validators=[MinValueValidator(Decimal('0'))])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'revenues',
                'ordering': ['year', 'month'],
                'constraints': [models.UniqueConstraint(fields=('year', 'month'), name='unique_revenue_period')],
            },
        ),
        migrations.CreateModel(
            name='Expense',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('category', models.CharField(choices=[('staff_salary', 'Lương nhân viên'), ('ingredients', 'Nguyên liệu'), ('fixed', 'Chi phí cố định'), ('additional', 'Chi phí phát sinh')], max_length=20)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=15, validators=[MinValueValidator(Decimal('0'))])),
                ('expense_date', models.DateField()),
                ('status', models.CharField(choices=[('spent', 'Đã chi'), ('draft', 'Nháp')], default='spent', max_length=10)),
                ('notes', models.TextField(blank=True)),
                ('year', models.PositiveIntegerField()),
                ('month', models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(12)])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'expenses',
                'ordering': ['-expense_date', '-created_at'],
                'indexes': [models.Index(fields=['year', 'month'], name='expense_period_idx')],
            },
        ),
    ]

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
import uuid


class UserRole(models.TextChoices):
    ADMIN = 'admin', 'Quản trị viên'
    MANAGER = 'manager', 'Quản lý'
    USER = 'user', 'Người dùng'


class UserManager(BaseUserManager):
    """Custom user manager for phone-number authentication."""

    def create_user(self, phone, password=None, **extra_fields):
        if not phone:
            raise ValueError('Phone number is required')

        phone = self.normalize_phone(phone)
        extra_fields.setdefault('username', phone)
        user = self.model(phone=phone, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, phone, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', UserRole.ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(phone, password, **extra_fields)

    @staticmethod
    def normalize_phone(phone):
        """Strip spaces, dots and dashes from a phone number."""
        return ''.join(ch for ch in str(phone) if ch not in ' .-')


class User(AbstractBaseUser, PermissionsMixin):
    """Back-office user logging in with a phone number."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    phone = models.CharField(unique=True, max_length=20, db_index=True)
    username = models.CharField(max_length=150, blank=True)
    name = models.CharField(max_length=100, blank=True)
    role = models.CharField(max_length=20, choices=UserRole.choices, default=UserRole.ADMIN)

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'phone'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['created_at'], name='user_created_at_idx'),
        ]

    def __str__(self):
        return self.phone

    def get_display_name(self):
        """Return name, username or phone, whichever is set first."""
        return self.name or self.username or self.phone

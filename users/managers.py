# users/managers.py
from django.contrib.auth.models import BaseUserManager


class UserManager(BaseUserManager):
    """
    Accounts are identified by a lower-cased e-mail address
    Račun se identifikuje e-mail adresom (mala slova)
    """

    def _create_user(self, email, password, role, **extra_fields):
        if not email:
            raise ValueError('The email must be set')

        user = self.model(email=self.normalize_email(email).lower(), role=role, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, role='professional', **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email, password, role, **extra_fields)

    def create_superuser(self, email=None, password=None, **extra_fields):
        # superusers always get the admin role
        extra_fields.pop('role', None)
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)

        if not (extra_fields['is_staff'] and extra_fields['is_superuser']):
            raise ValueError('Superuser must have is_staff=True and is_superuser=True.')

        return self._create_user(email, password, 'admin', **extra_fields)

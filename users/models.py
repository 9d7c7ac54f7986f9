# users/models.py
from django.contrib.auth.models import AbstractUser
from django.db import models
from .managers import UserManager


class User(AbstractUser):
    """
    Custom User Model
    Korisnički račun: e-mail za prijavu, uloga profesionalac ili administrator
    """
    username = None

    email = models.EmailField(
        unique=True,
        help_text="E-mail used to sign in"
    )

    ROLE_CHOICES = [
        ('professional', 'Professional'),
        ('admin', 'Admin'),
    ]
    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default='professional'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['first_name']

    objects = UserManager()

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"
        ordering = ['-created_at']

    def __str__(self):
        if self.role == 'admin':
            return f"{self.get_full_name() or self.email} (Admin)"
        return self.get_full_name() or self.email

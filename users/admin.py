# users/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Korisnički računi (prijava e-mailom)"""

    list_display = ['email', 'get_full_name', 'role', 'profile_status', 'is_active', 'is_staff', 'created_at']
    list_filter = ['role', 'is_active', 'is_staff']
    search_fields = ['email', 'first_name', 'last_name', 'profile__company_name']
    ordering = ['-created_at']
    list_select_related = ['profile']

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Osobni podaci', {'fields': ('first_name', 'last_name', 'role')}),
        ('Prava', {'fields': ('is_active', 'is_staff', 'is_superuser')}),
        ('Datumi', {'fields': ('last_login', 'date_joined'), 'classes': ('collapse',)}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'first_name', 'last_name', 'role', 'password1', 'password2'),
        }),
    )

    def profile_status(self, obj):
        profile = getattr(obj, 'profile', None)
        if profile is None:
            return '-'
        if profile.registration_completed:
            return 'završen'
        return f'korak {profile.registration_step}/9'
    profile_status.short_description = 'Profil'

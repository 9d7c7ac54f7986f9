# directory/visibility.py
"""
The single rule deciding which profiles may appear in public output:
an active profile whose owner finished registration.
"""
from django.db.models import Q

VISIBLE_Q = Q(is_active=True, registration_completed=True)


def is_publicly_visible(profile) -> bool:
    return profile.is_active is True and profile.registration_completed is True


def visible_profiles(queryset):
    return queryset.filter(VISIBLE_Q)

# profiles/services.py
import logging
import re

from django.db import transaction
from django.utils.text import slugify

from .models import Profile, ProfileService

logger = logging.getLogger('onboarding')

SLUG_FALLBACK = "profil"

# slugify() drops characters without an ASCII decomposition
_SLUG_TRANSLATION = str.maketrans({'đ': 'dj', 'Đ': 'Dj'})


# ==============================
# Slugs
# ==============================

def _slug_base(text):
    return slugify((text or "").translate(_SLUG_TRANSLATION))[:120] or SLUG_FALLBACK


def unique_slug(text: str, instance=None) -> str:
    """
    Slug from a display name, suffixed with -2, -3, ... on collision
    e.g. "Ana Marić" -> "ana-maric", "ana-maric-2"
    """
    base = _slug_base(text)

    taken = Profile.objects.filter(slug__startswith=base)
    if instance is not None and instance.pk:
        taken = taken.exclude(pk=instance.pk)
    taken = set(taken.values_list('slug', flat=True))

    if base not in taken:
        return base

    n = 2
    while f"{base}-{n}" in taken:
        n += 1
    return f"{base}-{n}"


def refresh_slug(profile: Profile) -> str:
    """Regenerate the slug when the display name no longer matches it"""
    expected = _slug_base(profile.display_name)
    if re.fullmatch(rf"{re.escape(expected)}(-\d+)?", profile.slug):
        return profile.slug
    profile.slug = unique_slug(profile.display_name, instance=profile)
    return profile.slug


# ==============================
# Lifecycle
# ==============================

def create_minimal_profile(user) -> Profile:
    """
    Empty, not yet visible profile opened at sign-up
    """
    profile = Profile.objects.create(
        user=user,
        slug=unique_slug(f"{user.first_name} {user.last_name}"),
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        is_active=True,
        registration_completed=False,
        registration_step=0,
    )
    logger.info("Profile %s opened for user %s", profile.pk, user.pk)
    return profile


def delete_profile(profile: Profile):
    """
    Remove a profile with all dependent records and its owner account
    """
    user = profile.user
    with transaction.atomic():
        # services, hours, references, certificates and gallery cascade
        profile.delete()
        if not (user.is_staff or user.is_superuser):
            user.delete()


def set_services(profile: Profile, category_ids):
    """Replace the categories a profile offers"""
    wanted = set(category_ids)
    with transaction.atomic():
        ProfileService.objects.filter(profile=profile).exclude(category_id__in=wanted).delete()
        existing = set(
            ProfileService.objects.filter(profile=profile).values_list('category_id', flat=True)
        )
        ProfileService.objects.bulk_create([
            ProfileService(profile=profile, category_id=cid)
            for cid in sorted(wanted - existing)
        ])


# ==============================
# Service membership lookup
# ==============================

def profile_ids_offering_any_of(category_ids) -> set:
    """
    Ids of profiles offering at least one of the given categories.
    Exact category match, subcategories are not expanded.
    """
    category_ids = set(category_ids)
    if not category_ids:
        return set()
    return set(
        ProfileService.objects
        .filter(category_id__in=category_ids)
        .values_list('profile_id', flat=True)
        .distinct()
    )

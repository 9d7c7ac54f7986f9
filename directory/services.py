# directory/services.py
from django.db.models import Prefetch

from profiles.models import Profile, ProfileService
from .filters import compile_filter, resolve_by_categories
from .ranking import rank, DEFAULT_ORDER, PROXIMITY_ORDER

# creation order, id as tie-break
DEFAULT_ORDERING = ('created_at', 'id')


def listing_queryset(queryset=None):
    """Profiles with everything a public card needs"""
    if queryset is None:
        queryset = Profile.objects.all()
    return queryset.select_related('business_city__entity').prefetch_related(
        Prefetch('profile_services', queryset=ProfileService.objects.select_related('category'))
    )


def search_profiles(filter_request, queryset=None):
    """
    Visible profiles matching `filter_request`, ranked.
    Every public listing goes through here.
    """
    queryset = listing_queryset(queryset).order_by(*DEFAULT_ORDERING)

    allowed_ids = resolve_by_categories(filter_request.services)
    if allowed_ids is not None:
        queryset = queryset.filter(id__in=allowed_ids)

    candidates = compile_filter(filter_request).apply(queryset)

    mode = PROXIMITY_ORDER if filter_request.near_me else DEFAULT_ORDER
    reference = None
    if filter_request.user_lat is not None and filter_request.user_lng is not None:
        reference = (filter_request.user_lat, filter_request.user_lng)

    return rank(candidates, mode=mode, reference=reference)

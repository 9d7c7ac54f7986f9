# directory/filters.py
"""
Filter compiler and service-category resolver.

Location, flags and visibility become one ORM query; the text term is
matched in Python with str.casefold so that diacritics (Marić, Đurić)
compare case-insensitively on every database backend.
"""
import logging
from dataclasses import dataclass
from typing import FrozenSet, Optional

from django.db.models import Q

from locations.services import city_exists, city_ids_for_entity
from profiles.services import profile_ids_offering_any_of
from services.models import ServiceCategory
from .visibility import VISIBLE_Q, is_publicly_visible

logger = logging.getLogger('directory')


def _fold(value):
    return (value or '').casefold()


@dataclass(frozen=True)
class CompiledFilter:
    query: Q
    text: str = ''
    city_ids: Optional[FrozenSet[int]] = None
    available: bool = False
    verified: bool = False

    def matches_text(self, profile) -> bool:
        if not self.text:
            return True
        haystacks = (
            profile.first_name,
            profile.last_name,
            f"{profile.first_name} {profile.last_name}",
            profile.company_name,
        )
        return any(self.text in _fold(value) for value in haystacks)

    def matches(self, profile) -> bool:
        """The whole predicate evaluated on an in-memory profile"""
        if not is_publicly_visible(profile):
            return False
        if self.city_ids is not None and profile.business_city_id not in self.city_ids:
            return False
        if self.available and not profile.accepting_new_clients:
            return False
        if self.verified and not profile.is_license_verified:
            return False
        return self.matches_text(profile)

    def apply(self, queryset):
        """Evaluate against a queryset, keeping its order"""
        return [profile for profile in queryset.filter(self.query) if self.matches_text(profile)]


def _resolve_city_ids(request):
    if request.city is not None:
        if city_exists(request.city):
            return frozenset([request.city])
        logger.debug("Ignoring unknown city %s", request.city)

    if request.entity:
        ids = city_ids_for_entity(request.entity)
        if ids is None:
            logger.debug("Ignoring unknown entity %r", request.entity)
            return None
        return frozenset(ids)

    return None


def compile_filter(request) -> CompiledFilter:
    """
    Conjunction of visibility with every criterion present in the request.
    An empty request matches exactly the publicly visible profiles.
    """
    query = VISIBLE_Q

    city_ids = _resolve_city_ids(request)
    if city_ids is not None:
        query &= Q(business_city_id__in=city_ids)

    if request.available:
        query &= Q(accepting_new_clients=True)

    if request.verified:
        query &= Q(is_license_verified=True)

    return CompiledFilter(
        query=query,
        text=_fold(request.q.strip()),
        city_ids=city_ids,
        available=request.available,
        verified=request.verified,
    )


def resolve_by_categories(selected):
    """
    Profile ids offering at least one selected category, or None when the
    selection imposes no constraint (empty, or only unknown ids).
    """
    selected = set(selected or ())
    if not selected:
        return None

    known = set(ServiceCategory.objects.filter(id__in=selected).values_list('id', flat=True))
    if selected - known:
        logger.debug("Ignoring unknown categories %s", sorted(selected - known))
    if not known:
        return None

    return profile_ids_offering_any_of(known)

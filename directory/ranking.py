# directory/ranking.py
import logging
from typing import Any, NamedTuple, Optional

from .geo import distance_km, is_valid_coordinate

logger = logging.getLogger('directory')

DEFAULT_ORDER = 'default'
PROXIMITY_ORDER = 'proximity'


class RankedResult(NamedTuple):
    profile: Any
    distance_km: Optional[float] = None


def _default(profiles):
    return [RankedResult(profile) for profile in profiles]


def rank(profiles, mode=DEFAULT_ORDER, reference=None):
    """
    Order filtered profiles.

    Default order keeps the input order. Proximity order drops profiles
    without coordinates and sorts the rest by distance from `reference`,
    ties keeping input order. A missing or invalid reference falls back to
    default order.
    """
    profiles = list(profiles)

    if mode != PROXIMITY_ORDER:
        return _default(profiles)

    # (0, 0) is a real point in the Gulf of Guinea and ranks like any other
    if reference is None or len(reference) != 2 or not is_valid_coordinate(*reference):
        logger.info("Proximity order requested without a valid reference %r, using default order", reference)
        return _default(profiles)

    ref_lat, ref_lng = float(reference[0]), float(reference[1])
    placed = [
        RankedResult(profile, distance_km(ref_lat, ref_lng, profile.latitude, profile.longitude))
        for profile in profiles
        if profile.latitude is not None and profile.longitude is not None
    ]
    # sorted() is stable
    return sorted(placed, key=lambda result: result.distance_km)


def within_radius(results, radius_km):
    return [result for result in results if result.distance_km is not None and result.distance_km <= radius_km]

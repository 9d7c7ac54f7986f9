# directory/geo.py
import math

EARTH_RADIUS_KM = 6371


def distance_km(lat1, lon1, lat2, lon2) -> float:
    """
    Great-circle distance in kilometers (haversine).
    Inputs are decimal degrees and must already be valid coordinates.
    """
    lat1, lon1, lat2, lon2 = float(lat1), float(lon1), float(lat2), float(lon2)

    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (math.sin(d_lat / 2) ** 2 +
         math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) *
         math.sin(d_lon / 2) ** 2)
    # float rounding can push a slightly above 1 for antipodal points
    a = min(1.0, a)

    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def is_valid_coordinate(lat, lng) -> bool:
    """Finite latitude in [-90, 90] and longitude in [-180, 180]"""
    try:
        lat, lng = float(lat), float(lng)
    except (TypeError, ValueError):
        return False

    if not (math.isfinite(lat) and math.isfinite(lng)):
        return False
    return -90 <= lat <= 90 and -180 <= lng <= 180

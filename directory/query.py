# directory/query.py
"""
Filter request decoded from the search page query string.

Decoding never fails: a malformed optional value is dropped and logged,
so a bad parameter widens the search instead of breaking it.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from django.http import QueryDict

from .geo import is_valid_coordinate

logger = logging.getLogger('directory')

# front end sentinel for "no entity / no city"
ALL = 'all'
TRUE_VALUES = ('true', '1', 'yes')


def _text(value):
    if value is None:
        return ''
    return str(value).strip()


def _flag(value):
    return _text(value).lower() in TRUE_VALUES


def _int(name, value):
    value = _text(value)
    if not value or value.lower() == ALL:
        return None
    try:
        return int(value)
    except ValueError:
        logger.debug("Ignoring malformed %s=%r", name, value)
        return None


def _float(name, value):
    value = _text(value)
    if not value:
        return None
    try:
        number = float(value)
    except ValueError:
        number = None
    if number is None or not math.isfinite(number):
        logger.debug("Ignoring malformed %s=%r", name, value)
        return None
    return number


def _getlist(params, key):
    if hasattr(params, 'getlist'):
        return params.getlist(key)
    value = params.get(key)
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


@dataclass(frozen=True)
class FilterRequest:
    q: str = ''
    entity: Optional[str] = None
    city: Optional[int] = None
    services: FrozenSet[int] = field(default_factory=frozenset)
    available: bool = False
    verified: bool = False
    near_me: bool = False
    user_lat: Optional[float] = None
    user_lng: Optional[float] = None

    def __post_init__(self):
        # canonical form, so encoding then decoding returns an equal request
        entity = _text(self.entity).lower()
        object.__setattr__(self, 'q', _text(self.q))
        object.__setattr__(self, 'entity', None if entity in ('', ALL) else entity)
        object.__setattr__(self, 'services', frozenset(self.services))

    @classmethod
    def from_query_params(cls, params):
        """
        Decode ?q=&entity=&city=&service=..&available=true&verified=true
        &nearMe=true&userLat=&userLng=
        """
        services = set()
        for raw in _getlist(params, 'service'):
            value = _int('service', str(raw))
            if value is not None:
                services.add(value)

        return cls(
            q=params.get('q'),
            entity=params.get('entity'),
            city=_int('city', params.get('city')),
            services=frozenset(services),
            available=_flag(params.get('available')),
            verified=_flag(params.get('verified')),
            near_me=_flag(params.get('nearMe')),
            user_lat=_float('userLat', params.get('userLat')),
            user_lng=_float('userLng', params.get('userLng')),
        )

    def to_query_params(self) -> QueryDict:
        params = QueryDict(mutable=True)
        if self.q:
            params['q'] = self.q
        if self.entity:
            params['entity'] = self.entity
        if self.city is not None:
            params['city'] = str(self.city)
        for service_id in sorted(self.services):
            params.appendlist('service', str(service_id))
        if self.available:
            params['available'] = 'true'
        if self.verified:
            params['verified'] = 'true'
        if self.near_me:
            params['nearMe'] = 'true'
        if self.user_lat is not None:
            params['userLat'] = repr(self.user_lat)
        if self.user_lng is not None:
            params['userLng'] = repr(self.user_lng)
        return params

    def to_query_string(self) -> str:
        return self.to_query_params().urlencode()

    @property
    def reference_point(self):
        """(lat, lng) when the caller sent a usable position, else None"""
        if self.user_lat is None or self.user_lng is None:
            return None
        if not is_valid_coordinate(self.user_lat, self.user_lng):
            return None
        return (self.user_lat, self.user_lng)

    @property
    def is_empty(self) -> bool:
        return self == FilterRequest()

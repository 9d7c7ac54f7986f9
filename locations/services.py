# locations/services.py
from .models import Entity, City


def city_ids_for_entity(entity_code):
    """
    Resolve an entity code to the ids of its cities.

    Returns None for an unknown code so callers can tell "no such entity"
    apart from "entity without cities" (an empty set).
    """
    if not entity_code:
        return None

    entity = Entity.objects.filter(code=entity_code).first()
    if entity is None:
        return None

    return set(City.objects.filter(entity=entity).values_list('id', flat=True))


def city_exists(city_id):
    return City.objects.filter(pk=city_id).exists()

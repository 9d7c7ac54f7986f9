# locations/management/commands/init_locations_data.py
from django.core.management.base import BaseCommand
from django.db import transaction
from locations.models import Entity, Canton, City


ENTITIES = [
    {'code': 'fbih', 'name': 'Federacija BiH'},
    {'code': 'rs', 'name': 'Republika Srpska'},
    {'code': 'brcko', 'name': 'Brčko Distrikt'},
]

FBIH_CANTONS = [
    'Unsko-sanski kanton',
    'Posavski kanton',
    'Tuzlanski kanton',
    'Zeničko-dobojski kanton',
    'Bosansko-podrinjski kanton',
    'Srednjobosanski kanton',
    'Hercegovačko-neretvanski kanton',
    'Zapadnohercegovački kanton',
    'Kanton Sarajevo',
    'Kanton 10',
]

# (entity, canton, name, postal code, latitude, longitude)
CITIES = [
    ('fbih', 'Kanton Sarajevo', 'Sarajevo', '71000', '43.856300', '18.413100'),
    ('fbih', 'Hercegovačko-neretvanski kanton', 'Mostar', '88000', '43.343800', '17.807800'),
    ('fbih', 'Tuzlanski kanton', 'Tuzla', '75000', '44.538400', '18.667100'),
    ('fbih', 'Zeničko-dobojski kanton', 'Zenica', '72000', '44.203400', '17.907700'),
    ('fbih', 'Unsko-sanski kanton', 'Bihać', '77000', '44.816900', '15.870800'),
    ('fbih', 'Srednjobosanski kanton', 'Travnik', '72270', '44.226400', '17.665800'),
    ('fbih', 'Bosansko-podrinjski kanton', 'Goražde', '73000', '43.666900', '18.975800'),
    ('fbih', 'Zapadnohercegovački kanton', 'Široki Brijeg', '88220', '43.383100', '17.593900'),
    ('fbih', 'Kanton 10', 'Livno', '80101', '43.826900', '17.007500'),
    ('fbih', 'Posavski kanton', 'Orašje', '76270', '45.036900', '18.693100'),
    ('rs', None, 'Banja Luka', '78000', '44.772200', '17.191000'),
    ('rs', None, 'Bijeljina', '76300', '44.756900', '19.215000'),
    ('rs', None, 'Doboj', '74000', '44.731900', '18.086900'),
    ('rs', None, 'Prijedor', '79101', '44.979700', '16.713600'),
    ('rs', None, 'Trebinje', '89101', '42.711900', '18.344200'),
    ('rs', None, 'Istočno Sarajevo', '71123', '43.820600', '18.356900'),
    ('brcko', None, 'Brčko', '76100', '44.872700', '18.810600'),
]


class Command(BaseCommand):
    help = 'Initialize entities, cantons and cities of Bosnia and Herzegovina'

    def handle(self, *args, **options):
        with transaction.atomic():
            self.stdout.write('Creating entities...')
            entities = self.create_entities()

            self.stdout.write('Creating cantons...')
            cantons = self.create_cantons(entities['fbih'])

            self.stdout.write('Creating cities...')
            self.create_cities(entities, cantons)

        self.stdout.write(self.style.SUCCESS('Successfully initialized locations data!'))

    def create_entities(self):
        entities = {}
        for i, data in enumerate(ENTITIES):
            entity, _ = Entity.objects.get_or_create(
                code=data['code'],
                defaults={'name': data['name'], 'order': i + 1}
            )
            entities[entity.code] = entity
        return entities

    def create_cantons(self, federation):
        cantons = {}
        for i, name in enumerate(FBIH_CANTONS):
            canton, _ = Canton.objects.get_or_create(
                entity=federation,
                name=name,
                defaults={'order': i + 1}
            )
            cantons[name] = canton
        return cantons

    def create_cities(self, entities, cantons):
        for entity_code, canton_name, name, postal_code, lat, lng in CITIES:
            City.objects.get_or_create(
                entity=entities[entity_code],
                name=name,
                defaults={
                    'canton': cantons.get(canton_name) if canton_name else None,
                    'postal_code': postal_code,
                    'latitude': lat,
                    'longitude': lng,
                }
            )

# locations/serializers.py
from rest_framework import serializers
from .models import Entity, Canton, City


class EntitySerializer(serializers.ModelSerializer):
    class Meta:
        model = Entity
        fields = ['id', 'code', 'name', 'order']
        read_only_fields = ['id']


class CantonSerializer(serializers.ModelSerializer):
    entity_code = serializers.CharField(source='entity.code', read_only=True)

    class Meta:
        model = Canton
        fields = ['id', 'name', 'entity', 'entity_code', 'order']
        read_only_fields = ['id', 'entity_code']


class CitySerializer(serializers.ModelSerializer):
    """
    City with its entity code, used by filters and the admin panel
    """
    entity_code = serializers.CharField(source='entity.code', read_only=True)
    entity_name = serializers.CharField(source='entity.name', read_only=True)
    canton_name = serializers.CharField(source='canton.name', read_only=True, default=None)

    class Meta:
        model = City
        fields = [
            'id', 'name', 'postal_code',
            'entity', 'entity_code', 'entity_name',
            'canton', 'canton_name',
            'latitude', 'longitude'
        ]
        read_only_fields = ['id', 'entity_code', 'entity_name', 'canton_name']

    def validate(self, attrs):
        entity = attrs.get('entity', getattr(self.instance, 'entity', None))
        canton = attrs.get('canton', getattr(self.instance, 'canton', None))
        if canton is not None and entity is not None and canton.entity_id != entity.id:
            raise serializers.ValidationError({'canton': "Canton belongs to a different entity"})

        latitude = attrs.get('latitude')
        longitude = attrs.get('longitude')
        if latitude is not None and not (-90 <= float(latitude) <= 90):
            raise serializers.ValidationError({'latitude': "Latitude must be between -90 and 90"})
        if longitude is not None and not (-180 <= float(longitude) <= 180):
            raise serializers.ValidationError({'longitude': "Longitude must be between -180 and 180"})
        return attrs


class CitySimpleSerializer(serializers.ModelSerializer):
    entity_code = serializers.CharField(source='entity.code', read_only=True)

    class Meta:
        model = City
        fields = ['id', 'name', 'entity_code']

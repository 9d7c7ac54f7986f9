# directory/serializers.py
from rest_framework import serializers

from profiles.serializers import ProfileSummarySerializer


def _distance(result):
    if result.distance_km is None:
        return None
    return round(result.distance_km, 2)


class RankedProfileSerializer(serializers.BaseSerializer):
    """
    ProfileSummary of a ranked result, with distanceKm when the
    result was ranked by proximity
    """

    def to_representation(self, instance):
        data = ProfileSummarySerializer(instance.profile, context=self.context).data
        if instance.distance_km is not None:
            data['distanceKm'] = _distance(instance)
        return data


class MapMarkerSerializer(serializers.BaseSerializer):
    def to_representation(self, instance):
        profile = instance.profile
        data = {
            'id': profile.id,
            'slug': profile.slug,
            'display_name': profile.display_name,
            'short_description': profile.short_description,
            'latitude': float(profile.latitude),
            'longitude': float(profile.longitude),
        }
        if instance.distance_km is not None:
            data['distanceKm'] = _distance(instance)
        return data

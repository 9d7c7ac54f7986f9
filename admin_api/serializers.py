# admin_api/serializers.py
from rest_framework import serializers

from profiles.models import Profile
from profiles.serializers import OwnerProfileSerializer
from directory.visibility import is_publicly_visible


class DashboardStatsSerializer(serializers.Serializer):
    total_profiles = serializers.IntegerField()
    visible_profiles = serializers.IntegerField()
    inactive_profiles = serializers.IntegerField()
    incomplete_profiles = serializers.IntegerField()
    verified_profiles = serializers.IntegerField()
    new_profiles_this_month = serializers.IntegerField()
    published_posts = serializers.IntegerField()
    draft_posts = serializers.IntegerField()


class AdminProfileListSerializer(serializers.ModelSerializer):
    """Row in the moderation table"""
    user_email = serializers.EmailField(source='user.email', read_only=True)
    display_name = serializers.CharField(read_only=True)
    business_city_name = serializers.CharField(source='business_city.name', read_only=True, default=None)
    is_visible = serializers.SerializerMethodField()

    class Meta:
        model = Profile
        fields = [
            'id', 'slug', 'user_email', 'display_name', 'business_type',
            'business_city_name', 'is_active', 'registration_completed',
            'registration_step', 'is_license_verified', 'license_number',
            'is_visible', 'created_at'
        ]

    def get_is_visible(self, obj):
        return is_publicly_visible(obj)


class AdminProfileDetailSerializer(OwnerProfileSerializer):
    user_email = serializers.EmailField(source='user.email', read_only=True)
    is_visible = serializers.SerializerMethodField()

    class Meta(OwnerProfileSerializer.Meta):
        fields = OwnerProfileSerializer.Meta.fields + ['user_email', 'is_visible']

    def get_is_visible(self, obj):
        return is_publicly_visible(obj)

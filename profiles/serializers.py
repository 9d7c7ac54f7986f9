# profiles/serializers.py
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from rest_framework import serializers

from locations.models import City
from services.models import ServiceCategory
from services.tree import build_category_tree
from users.utils import to_e164
from .images import validate_image_file, process_profile_image, delete_image_file
from .models import (
    Profile, WorkingHours, ClientReference, Certificate, GalleryImage
)
from .services import set_services


# ==================== Public ====================

class PublicCitySerializer(serializers.ModelSerializer):
    entity_code = serializers.CharField(source='entity.code', read_only=True)

    class Meta:
        model = City
        fields = ['id', 'name', 'entity_code']


class ProfileSummarySerializer(serializers.ModelSerializer):
    """
    Public card of a profile, safe for anonymous callers.
    Private fields (tax id, license number, personal address, status flags)
    are deliberately not listed.
    """
    display_name = serializers.CharField(read_only=True)
    business_city = PublicCitySerializer(read_only=True)
    services = serializers.SerializerMethodField()

    class Meta:
        model = Profile
        fields = [
            'id', 'slug', 'display_name', 'business_type',
            'first_name', 'last_name', 'company_name',
            'short_description', 'profile_image',
            'email', 'phone', 'website',
            'works_online', 'has_physical_office', 'accepting_new_clients',
            'is_license_verified', 'years_experience',
            'latitude', 'longitude',
            'business_city', 'services',
        ]

    def get_services(self, obj):
        return [
            {'id': ps.category_id, 'name': ps.category.name}
            for ps in obj.profile_services.all()
        ]


class WorkingHoursSerializer(serializers.ModelSerializer):
    class Meta:
        model = WorkingHours
        fields = ['day_of_week', 'is_closed', 'open_time', 'close_time']


class ClientReferenceSerializer(serializers.ModelSerializer):
    class Meta:
        model = ClientReference
        fields = ['id', 'client_name', 'description']


class CertificateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Certificate
        fields = ['id', 'name', 'issuer', 'year']


class GalleryImageSerializer(serializers.ModelSerializer):
    class Meta:
        model = GalleryImage
        fields = ['id', 'image', 'caption', 'display_order']
        read_only_fields = ['id']

    def validate_image(self, value):
        try:
            validate_image_file(value)
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.messages)
        return value


class ProfilePublicDetailSerializer(ProfileSummarySerializer):
    """
    Full public profile page
    Javni profil
    """
    postal_code = serializers.CharField(source='business_city.postal_code', read_only=True, default='')
    service_groups = serializers.SerializerMethodField()
    working_hours = WorkingHoursSerializer(many=True, read_only=True)
    client_references = ClientReferenceSerializer(many=True, read_only=True)
    certificates = CertificateSerializer(many=True, read_only=True)
    gallery = GalleryImageSerializer(many=True, read_only=True)

    class Meta(ProfileSummarySerializer.Meta):
        fields = ProfileSummarySerializer.Meta.fields + [
            'long_description', 'business_street', 'postal_code',
            'service_groups', 'working_hours', 'client_references',
            'certificates', 'gallery',
        ]

    def get_service_groups(self, obj):
        """Offered categories grouped under their main category"""
        offered = {ps.category_id for ps in obj.profile_services.all()}
        if not offered:
            return []

        rows = ServiceCategory.objects.filter(is_active=True).only('id', 'name', 'parent_id', 'order')
        groups = []
        for main in build_category_tree(rows):
            subs = [{'id': s.id, 'name': s.name} for s in main.subcategories if s.id in offered]
            if main.id in offered or subs:
                groups.append({
                    'id': main.id,
                    'name': main.name,
                    'offered': main.id in offered,
                    'subcategories': subs,
                })
        return groups


# ==================== Owner ====================

class OwnerProfileSerializer(ProfilePublicDetailSerializer):
    """
    Everything the owner sees in the dashboard, private fields included
    """
    personal_city = serializers.PrimaryKeyRelatedField(read_only=True)
    service_ids = serializers.SerializerMethodField()

    class Meta(ProfilePublicDetailSerializer.Meta):
        fields = ProfilePublicDetailSerializer.Meta.fields + [
            'tax_id', 'license_number', 'personal_street', 'personal_city',
            'service_ids', 'is_active', 'registration_completed',
            'registration_step', 'created_at', 'updated_at',
        ]

    def get_service_ids(self, obj):
        return sorted(ps.category_id for ps in obj.profile_services.all())


# ==================== Wizard steps ====================

class WizardStepSerializer(serializers.Serializer):
    """
    Base for the onboarding steps: validated fields are written
    straight onto the profile.
    """
    profile_fields = ()

    def update(self, instance, validated_data):
        for field in self.profile_fields:
            if field in validated_data:
                setattr(instance, field, validated_data[field])
        instance.save()
        return instance


class PersonalDataStepSerializer(WizardStepSerializer):
    """1. Lični podaci"""
    profile_fields = ('first_name', 'last_name', 'phone', 'personal_street', 'personal_city')

    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
    personal_street = serializers.CharField(max_length=200, required=False, allow_blank=True)
    personal_city = serializers.PrimaryKeyRelatedField(
        queryset=City.objects.all(), required=False, allow_null=True
    )

    def validate_phone(self, value):
        if not value:
            return ''
        try:
            return to_e164(value)
        except ValueError:
            raise serializers.ValidationError("invalid_phone_format")


class BusinessDataStepSerializer(WizardStepSerializer):
    """2. Poslovni podaci"""
    profile_fields = (
        'business_type', 'company_name', 'website', 'tax_id',
        'business_street', 'business_city', 'latitude', 'longitude',
    )

    business_type = serializers.ChoiceField(choices=Profile.BUSINESS_TYPE_CHOICES)
    company_name = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    website = serializers.URLField(required=False, allow_blank=True)
    tax_id = serializers.CharField(max_length=20, required=False, allow_blank=True)
    business_street = serializers.CharField(max_length=200, required=False, allow_blank=True)
    business_city = serializers.PrimaryKeyRelatedField(queryset=City.objects.all())
    latitude = serializers.DecimalField(
        max_digits=9, decimal_places=6, required=False, allow_null=True,
        min_value=-90, max_value=90
    )
    longitude = serializers.DecimalField(
        max_digits=9, decimal_places=6, required=False, allow_null=True,
        min_value=-180, max_value=180
    )

    def validate(self, attrs):
        if attrs['business_type'] == 'company' and not attrs.get('company_name', '').strip():
            raise serializers.ValidationError({'company_name': "Required for companies"})

        if attrs['business_type'] == 'individual':
            attrs['company_name'] = attrs.get('company_name', '').strip()

        has_lat = attrs.get('latitude') is not None
        has_lng = attrs.get('longitude') is not None
        if has_lat != has_lng:
            raise serializers.ValidationError("latitude and longitude must be given together")
        return attrs


class ServicesStepSerializer(WizardStepSerializer):
    """3. Usluge"""
    services = serializers.ListField(
        child=serializers.IntegerField(min_value=1), allow_empty=False
    )

    def validate_services(self, value):
        ids = set(value)
        known = set(
            ServiceCategory.objects.filter(id__in=ids, is_active=True).values_list('id', flat=True)
        )
        unknown = ids - known
        if unknown:
            raise serializers.ValidationError(f"Unknown categories: {sorted(unknown)}")
        return sorted(ids)

    def update(self, instance, validated_data):
        set_services(instance, validated_data['services'])
        instance.save(update_fields=['updated_at'])
        return instance


class WorkingDaySerializer(serializers.Serializer):
    day_of_week = serializers.IntegerField(min_value=1, max_value=7)
    is_closed = serializers.BooleanField(default=False)
    open_time = serializers.TimeField(required=False, allow_null=True)
    close_time = serializers.TimeField(required=False, allow_null=True)

    def validate(self, attrs):
        if attrs['is_closed']:
            attrs['open_time'] = None
            attrs['close_time'] = None
            return attrs

        open_time, close_time = attrs.get('open_time'), attrs.get('close_time')
        if open_time is None or close_time is None:
            raise serializers.ValidationError("open_time and close_time are required on working days")
        if open_time >= close_time:
            raise serializers.ValidationError("open_time must be before close_time")
        return attrs


class WorkingHoursStepSerializer(WizardStepSerializer):
    """4. Radno vrijeme"""
    working_hours = WorkingDaySerializer(many=True, allow_empty=False)

    def validate_working_hours(self, value):
        days = [item['day_of_week'] for item in value]
        if len(days) != len(set(days)):
            raise serializers.ValidationError("Each day may appear only once")
        return value

    def update(self, instance, validated_data):
        with transaction.atomic():
            instance.working_hours.all().delete()
            WorkingHours.objects.bulk_create([
                WorkingHours(profile=instance, **item)
                for item in validated_data['working_hours']
            ])
            instance.save(update_fields=['updated_at'])
        return instance


class WorkOptionsStepSerializer(WizardStepSerializer):
    """5. Način rada"""
    profile_fields = ('works_online', 'has_physical_office', 'accepting_new_clients', 'years_experience')

    works_online = serializers.BooleanField(default=False)
    has_physical_office = serializers.BooleanField(default=False)
    accepting_new_clients = serializers.BooleanField(default=True)
    years_experience = serializers.IntegerField(min_value=0, max_value=80, default=0)


class ReferencesStepSerializer(WizardStepSerializer):
    """6. Reference klijenata (optional, may be empty)"""
    references = ClientReferenceSerializer(many=True, required=False, default=list)

    def update(self, instance, validated_data):
        with transaction.atomic():
            instance.client_references.all().delete()
            ClientReference.objects.bulk_create([
                ClientReference(profile=instance, **item)
                for item in validated_data['references']
            ])
            instance.save(update_fields=['updated_at'])
        return instance


class LicenseStepSerializer(WizardStepSerializer):
    """7. Licenca i certifikati"""
    profile_fields = ('license_number',)

    license_number = serializers.CharField(max_length=50, required=False, allow_blank=True)
    certificates = CertificateSerializer(many=True, required=False, default=list)

    def update(self, instance, validated_data):
        with transaction.atomic():
            if 'license_number' in validated_data and validated_data['license_number'] != instance.license_number:
                # a changed number has to be verified again
                instance.is_license_verified = False
            super().update(instance, validated_data)
            instance.certificates.all().delete()
            Certificate.objects.bulk_create([
                Certificate(profile=instance, **item)
                for item in validated_data['certificates']
            ])
        return instance


class ContactMediaStepSerializer(WizardStepSerializer):
    """8. Kontakt i slika"""
    profile_fields = ('email', 'website')

    email = serializers.EmailField(required=False, allow_blank=True)
    website = serializers.URLField(required=False, allow_blank=True)
    profile_image = serializers.ImageField(required=False)

    def validate_profile_image(self, value):
        try:
            validate_image_file(value)
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.messages)
        return value

    def update(self, instance, validated_data):
        image = validated_data.get('profile_image')
        if image is not None:
            delete_image_file(instance.profile_image)
            instance.profile_image = process_profile_image(image, instance.pk)
        return super().update(instance, validated_data)


class DescriptionsStepSerializer(WizardStepSerializer):
    """9. Opisi"""
    profile_fields = ('short_description', 'long_description')

    short_description = serializers.CharField(max_length=150)
    long_description = serializers.CharField(min_length=100)


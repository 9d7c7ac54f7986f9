# profiles/admin.py
from django.contrib import admin
from .models import (
    Profile, ProfileService, WorkingHours, ClientReference, Certificate, GalleryImage
)


class ProfileServiceInline(admin.TabularInline):
    model = ProfileService
    extra = 0


class WorkingHoursInline(admin.TabularInline):
    model = WorkingHours
    extra = 0


class CertificateInline(admin.TabularInline):
    model = Certificate
    extra = 0


class ClientReferenceInline(admin.TabularInline):
    model = ClientReference
    extra = 0


class GalleryImageInline(admin.TabularInline):
    model = GalleryImage
    extra = 0


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = [
        'id', 'slug', 'first_name', 'last_name', 'company_name', 'business_city',
        'is_active', 'registration_completed', 'registration_step', 'is_license_verified'
    ]
    list_filter = ['is_active', 'registration_completed', 'is_license_verified', 'business_type']
    search_fields = ['first_name', 'last_name', 'company_name', 'user__email', 'slug']
    raw_id_fields = ['user']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [
        ProfileServiceInline, WorkingHoursInline, CertificateInline,
        ClientReferenceInline, GalleryImageInline,
    ]

    fieldsets = (
        ('Account', {
            'fields': ('user', 'slug')
        }),
        ('Identity', {
            'fields': ('first_name', 'last_name', 'business_type', 'company_name')
        }),
        ('Descriptions', {
            'fields': ('short_description', 'long_description', 'profile_image')
        }),
        ('Contact', {
            'fields': ('email', 'phone', 'website')
        }),
        ('Private data', {
            'fields': ('tax_id', 'license_number', 'personal_street', 'personal_city'),
            'classes': ('collapse',)
        }),
        ('Business address', {
            'fields': ('business_street', 'business_city', 'latitude', 'longitude')
        }),
        ('Work options', {
            'fields': ('works_online', 'has_physical_office', 'accepting_new_clients', 'years_experience')
        }),
        ('Status', {
            'fields': (
                'is_active', 'registration_completed', 'registration_step',
                'is_license_verified', 'created_at', 'updated_at'
            )
        }),
    )

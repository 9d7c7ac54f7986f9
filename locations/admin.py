# locations/admin.py
from django.contrib import admin
from .models import Entity, Canton, City


@admin.register(Entity)
class EntityAdmin(admin.ModelAdmin):
    list_display = ['id', 'code', 'name', 'order']
    list_editable = ['order']
    search_fields = ['code', 'name']


@admin.register(Canton)
class CantonAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'entity', 'order']
    list_filter = ['entity']
    search_fields = ['name']


@admin.register(City)
class CityAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'postal_code', 'entity', 'canton']
    list_filter = ['entity', 'canton']
    search_fields = ['name', 'postal_code']
    ordering = ['name']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'postal_code', 'entity', 'canton')
        }),
        ('Location (Optional)', {
            'fields': ('latitude', 'longitude'),
            'classes': ('collapse',)
        }),
    )

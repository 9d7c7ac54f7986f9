# services/admin.py
from django.contrib import admin
from .models import ServiceCategory


@admin.register(ServiceCategory)
class ServiceCategoryAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'parent', 'is_active', 'order']
    list_editable = ['is_active', 'order']
    list_filter = ['is_active', 'parent']
    search_fields = ['name']
    ordering = ['parent__id', 'order', 'name']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'parent', 'description')
        }),
        ('Settings', {
            'fields': ('is_active', 'order')
        }),
    )

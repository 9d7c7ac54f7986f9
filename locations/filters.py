# locations/filters.py
import django_filters

from .models import Canton, City


class CantonFilter(django_filters.FilterSet):
    entity = django_filters.CharFilter(field_name='entity__code', lookup_expr='iexact')

    class Meta:
        model = Canton
        fields = ['entity']


class CityFilter(django_filters.FilterSet):
    """?entity=<code>&canton=<id>"""
    entity = django_filters.CharFilter(field_name='entity__code', lookup_expr='iexact')

    class Meta:
        model = City
        fields = ['entity', 'canton']

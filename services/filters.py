# services/filters.py
import django_filters
from django_filters.widgets import BooleanWidget

from .models import ServiceCategory


class ServiceCategoryFilter(django_filters.FilterSet):
    """
    ?main=true  -> only main categories
    ?parent=<id> -> subcategories of one main category
    """
    main = django_filters.BooleanFilter(field_name='parent', lookup_expr='isnull', widget=BooleanWidget())

    class Meta:
        model = ServiceCategory
        fields = ['main', 'parent']

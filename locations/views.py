# locations/views.py
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import generics
from rest_framework.permissions import AllowAny
from .filters import CantonFilter, CityFilter
from .models import Entity, Canton, City
from .serializers import EntitySerializer, CantonSerializer, CitySerializer


class EntityListView(generics.ListAPIView):
    queryset = Entity.objects.all().order_by('order', 'name')
    serializer_class = EntitySerializer
    permission_classes = [AllowAny]
    pagination_class = None


class CantonListView(generics.ListAPIView):
    """
    Cantons, optionally narrowed to one entity (?entity=fbih)
    """
    queryset = Canton.objects.select_related('entity').order_by('order', 'name')
    serializer_class = CantonSerializer
    permission_classes = [AllowAny]
    pagination_class = None
    filter_backends = [DjangoFilterBackend]
    filterset_class = CantonFilter


class CityListView(generics.ListAPIView):
    """
    Cities for the registration form and the search filters
    ?entity=<code>&canton=<id>
    """
    queryset = City.objects.select_related('entity', 'canton').order_by('name')
    serializer_class = CitySerializer
    permission_classes = [AllowAny]
    pagination_class = None
    filter_backends = [DjangoFilterBackend]
    filterset_class = CityFilter

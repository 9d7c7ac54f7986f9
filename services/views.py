# services/views.py
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import generics, status, filters
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .filters import ServiceCategoryFilter
from .models import ServiceCategory
from .serializers import ServiceCategorySerializer
from .tree import build_category_tree, tree_as_dicts


class ServiceCategoryListView(generics.ListAPIView):
    """
    List active service categories
    ?main=true returns only main categories, ?parent=<id> one group
    """
    queryset = ServiceCategory.objects.filter(is_active=True).select_related('parent')
    serializer_class = ServiceCategorySerializer
    permission_classes = [AllowAny]
    pagination_class = None
    filter_backends = [filters.SearchFilter, filters.OrderingFilter, DjangoFilterBackend]
    search_fields = ['name']
    filterset_class = ServiceCategoryFilter
    ordering_fields = ['order', 'name']
    ordering = ['order', 'name']


class ServiceCategoryDetailView(generics.RetrieveAPIView):
    queryset = ServiceCategory.objects.filter(is_active=True)
    serializer_class = ServiceCategorySerializer
    permission_classes = [AllowAny]
    lookup_field = 'id'


@api_view(['GET'])
@permission_classes([AllowAny])
def category_tree(request):
    """
    Main categories with their subcategories
    Glavne kategorije sa podkategorijama
    """
    rows = ServiceCategory.objects.filter(is_active=True).only('id', 'name', 'parent_id', 'order')
    tree = build_category_tree(rows)
    return Response(tree_as_dicts(tree), status=status.HTTP_200_OK)

# directory/views.py
from dataclasses import replace

from django.conf import settings
from django.db.models import Count
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from locations.models import Entity, City
from locations.serializers import EntitySerializer, CitySimpleSerializer
from profiles.models import Profile
from services.models import ServiceCategory
from services.tree import build_category_tree, tree_as_dicts
from .query import FilterRequest, _float
from .ranking import within_radius
from .serializers import RankedProfileSerializer, MapMarkerSerializer
from .services import search_profiles
from .visibility import visible_profiles


HOMEPAGE_CATEGORY_LIMIT = 6


class DirectoryPagination(PageNumberPagination):
    page_size = settings.DIRECTORY_PAGE_SIZE
    page_size_query_param = 'page_size'
    max_page_size = settings.DIRECTORY_MAX_PAGE_SIZE


# ==================== Search ====================

@api_view(['GET'])
@permission_classes([AllowAny])
def search(request):
    """
    Search page
    GET /api/directory/search/?q=&entity=&city=&service=&available=&verified=&nearMe=&userLat=&userLng=
    """
    filter_request = FilterRequest.from_query_params(request.query_params)
    results = search_profiles(filter_request)

    paginator = DirectoryPagination()
    page = paginator.paginate_queryset(results, request)
    serializer = RankedProfileSerializer(page, many=True, context={'request': request})
    return paginator.get_paginated_response(serializer.data)


@api_view(['GET'])
@permission_classes([AllowAny])
def map_markers(request):
    """
    Map page: same filters, only profiles that can be placed on the map
    GET /api/directory/map/
    """
    filter_request = FilterRequest.from_query_params(request.query_params)
    results = [
        result for result in search_profiles(filter_request)
        if result.profile.has_coordinates
    ]
    return Response({
        'count': len(results),
        'results': MapMarkerSerializer(results, many=True).data
    })


@api_view(['GET'])
@permission_classes([AllowAny])
def nearby(request):
    """
    Homepage "professionals near you"
    GET /api/directory/nearby/?userLat=&userLng=&radiusKm=
    """
    filter_request = replace(FilterRequest.from_query_params(request.query_params), near_me=True)
    if filter_request.reference_point is None:
        return Response({
            "code": "invalid_reference_point",
            "detail": "userLat and userLng must be valid decimal degrees"
        }, status=status.HTTP_400_BAD_REQUEST)

    # malformed or non-finite radius falls back to the default
    radius_km = _float('radiusKm', request.query_params.get('radiusKm'))
    if radius_km is None:
        radius_km = settings.DIRECTORY_NEARBY_RADIUS_KM
    radius_km = max(0.0, radius_km)

    results = within_radius(search_profiles(filter_request), radius_km)
    return Response({
        'count': len(results),
        'radiusKm': radius_km,
        'results': RankedProfileSerializer(results, many=True, context={'request': request}).data
    })


# ==================== Homepage ====================

@api_view(['GET'])
@permission_classes([AllowAny])
def featured(request):
    """
    Homepage listing: first visible profiles and the main categories
    GET /api/directory/featured/
    """
    results = search_profiles(FilterRequest())[:settings.DIRECTORY_FEATURED_LIMIT]
    categories = ServiceCategory.objects.filter(
        is_active=True, parent__isnull=True
    ).order_by('name')[:HOMEPAGE_CATEGORY_LIMIT]

    return Response({
        'profiles': RankedProfileSerializer(results, many=True, context={'request': request}).data,
        'categories': [{'id': c.id, 'name': c.name} for c in categories],
    })


@api_view(['GET'])
@permission_classes([AllowAny])
def search_filters(request):
    """
    Options for the search filter panel
    GET /api/directory/filters/
    """
    entities = Entity.objects.all()
    cities = City.objects.select_related('entity').order_by('name')
    rows = ServiceCategory.objects.filter(is_active=True).only('id', 'name', 'parent_id', 'order')

    return Response({
        'entities': EntitySerializer(entities, many=True).data,
        'cities': CitySimpleSerializer(cities, many=True).data,
        'categories': tree_as_dicts(build_category_tree(rows)),
    })


@api_view(['GET'])
@permission_classes([AllowAny])
def directory_stats(request):
    """
    GET /api/directory/stats/
    """
    visible = visible_profiles(Profile.objects.all())

    top_categories = ServiceCategory.objects.filter(
        is_active=True,
        profile_services__profile__is_active=True,
        profile_services__profile__registration_completed=True,
    ).annotate(
        profile_count=Count('profile_services__profile', distinct=True)
    ).order_by('-profile_count', 'name')[:5].values('id', 'name', 'profile_count')

    return Response({
        'total_profiles': visible.count(),
        'verified_profiles': visible.filter(is_license_verified=True).count(),
        'accepting_new_clients': visible.filter(accepting_new_clients=True).count(),
        'works_online': visible.filter(works_online=True).count(),
        'top_categories': list(top_categories),
    })

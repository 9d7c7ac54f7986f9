# directory/urls.py
from django.urls import path
from .views import search, map_markers, nearby, featured, search_filters, directory_stats

urlpatterns = [
    path('search/', search, name='directory-search'),
    path('map/', map_markers, name='directory-map'),
    path('nearby/', nearby, name='directory-nearby'),
    path('featured/', featured, name='directory-featured'),
    path('filters/', search_filters, name='directory-filters'),
    path('stats/', directory_stats, name='directory-stats'),
]

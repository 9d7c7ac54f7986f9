# locations/urls.py
from django.urls import path
from .views import EntityListView, CantonListView, CityListView

urlpatterns = [
    path('entities/', EntityListView.as_view(), name='location-entities'),
    path('cantons/', CantonListView.as_view(), name='location-cantons'),
    path('cities/', CityListView.as_view(), name='location-cities'),
]

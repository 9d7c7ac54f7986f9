"""
End-to-end tests for the directory pipeline and its public endpoints.
"""

from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from directory.query import FilterRequest
from directory.services import search_profiles


PRIVATE_FIELDS = {
    'tax_id', 'license_number', 'personal_street', 'personal_city',
    'is_active', 'registration_completed', 'registration_step', 'user',
}


@pytest.fixture
def payroll(category_factory):
    main = category_factory(name='Računovodstvo')
    return category_factory(name='Payroll', parent=main)


@pytest.mark.django_db
class TestPipeline:

    def test_visibility_gates_city_and_category_filter(self, profile_factory, sarajevo, payroll):
        p1 = profile_factory(business_city=sarajevo, services=[payroll])
        profile_factory(registration_completed=False, business_city=sarajevo, services=[payroll])
        profile_factory(is_active=False, business_city=sarajevo, services=[payroll])

        results = search_profiles(FilterRequest(city=sarajevo.id, services=frozenset({payroll.id})))

        assert [r.profile.id for r in results] == [p1.id]

    def test_default_order_is_creation_order(self, profile_factory):
        created = [profile_factory() for _ in range(3)]

        assert [r.profile.id for r in search_profiles(FilterRequest())] == [p.id for p in created]

    def test_near_me_ranks_by_distance(self, profile_factory, sarajevo, banja_luka):
        far = profile_factory(latitude=Decimal('44.772200'), longitude=Decimal('17.191000'))
        near = profile_factory(latitude=Decimal('43.856300'), longitude=Decimal('18.413100'))
        profile_factory(latitude=None, longitude=None)

        request = FilterRequest(near_me=True, user_lat=43.85, user_lng=18.41)
        results = search_profiles(request)

        assert [r.profile.id for r in results] == [near.id, far.id]
        assert results[0].distance_km < 1

    def test_near_me_without_position_uses_default_order(self, profile_factory):
        p1 = profile_factory(latitude=None, longitude=None)
        p2 = profile_factory(latitude=Decimal('44.0'), longitude=Decimal('18.0'))

        results = search_profiles(FilterRequest(near_me=True))

        assert [r.profile.id for r in results] == [p1.id, p2.id]


@pytest.mark.django_db
class TestSearchEndpoint:

    def test_search_is_public_and_paginated(self, api_client, profile_factory):
        for _ in range(3):
            profile_factory()
        profile_factory(registration_completed=False)

        response = api_client.get(reverse('directory-search'), {'page_size': 2})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 3
        assert len(response.data['results']) == 2

    def test_summary_hides_private_fields(self, api_client, profile_factory):
        profile_factory(tax_id='4200000000000', license_number='L-1', personal_street='Tajna 1')

        response = api_client.get(reverse('directory-search'))
        item = response.data['results'][0]

        assert PRIVATE_FIELDS.isdisjoint(item)
        assert '4200000000000' not in str(response.data)
        assert 'distanceKm' not in item

    def test_display_name_for_company(self, api_client, profile_factory):
        profile_factory(business_type='company', company_name='Bilans d.o.o.', first_name='Ana')

        response = api_client.get(reverse('directory-search'))

        assert response.data['results'][0]['display_name'] == 'Bilans d.o.o.'

    def test_query_params(self, api_client, profile_factory, sarajevo, payroll):
        match = profile_factory(first_name='Ana', last_name='Marić', business_city=sarajevo, services=[payroll])
        profile_factory(first_name='Ana', last_name='Marić', business_city=sarajevo)

        response = api_client.get(
            reverse('directory-search') + f'?q=ana&entity=fbih&service={payroll.id}&service=999'
        )

        assert [item['id'] for item in response.data['results']] == [match.id]
        assert response.data['results'][0]['services'] == [{'id': payroll.id, 'name': 'Payroll'}]
        assert response.data['results'][0]['business_city']['entity_code'] == 'fbih'

    def test_bad_params_do_not_fail(self, api_client, profile_factory):
        profile_factory()

        response = api_client.get(
            reverse('directory-search'),
            {'city': 'abc', 'entity': 'nowhere', 'service': 'x', 'nearMe': 'true', 'userLat': 'north'}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1

    def test_distance_in_proximity_results(self, api_client, profile_factory):
        profile_factory(latitude=Decimal('43.856300'), longitude=Decimal('18.413100'))

        response = api_client.get(
            reverse('directory-search'),
            {'nearMe': 'true', 'userLat': '43.8563', 'userLng': '18.4131'}
        )

        assert response.data['results'][0]['distanceKm'] == 0

    def test_empty_result(self, api_client):
        response = api_client.get(reverse('directory-search'), {'q': 'nobody'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 0
        assert response.data['results'] == []


@pytest.mark.django_db
class TestMapAndNearby:

    def test_map_only_has_profiles_with_coordinates(self, api_client, profile_factory):
        placed = profile_factory(latitude=Decimal('43.8'), longitude=Decimal('18.4'))
        profile_factory(latitude=None, longitude=None)
        profile_factory(latitude=Decimal('43.8'), longitude=Decimal('18.4'), is_active=False)

        response = api_client.get(reverse('directory-map'))

        assert response.data['count'] == 1
        marker = response.data['results'][0]
        assert marker['id'] == placed.id
        assert marker['latitude'] == pytest.approx(43.8)

    def test_nearby_requires_reference_point(self, api_client):
        response = api_client.get(reverse('directory-nearby'), {'userLat': '200', 'userLng': '18'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'invalid_reference_point'

    def test_nearby_within_radius(self, api_client, profile_factory):
        sarajevo = profile_factory(latitude=Decimal('43.856300'), longitude=Decimal('18.413100'))
        profile_factory(latitude=Decimal('44.772200'), longitude=Decimal('17.191000'))

        response = api_client.get(
            reverse('directory-nearby'),
            {'userLat': '43.85', 'userLng': '18.40', 'radiusKm': '50'}
        )

        assert response.status_code == status.HTTP_200_OK
        assert [item['id'] for item in response.data['results']] == [sarajevo.id]
        assert response.data['results'][0]['distanceKm'] < 2

    @pytest.mark.parametrize('radius', ['inf', 'nan', 'daleko'])
    def test_nearby_ignores_bad_radius(self, api_client, profile_factory, settings, radius):
        settings.DIRECTORY_NEARBY_RADIUS_KM = 50.0
        close = profile_factory(latitude=Decimal('43.856300'), longitude=Decimal('18.413100'))
        profile_factory(latitude=Decimal('44.772200'), longitude=Decimal('17.191000'))

        response = api_client.get(
            reverse('directory-nearby'),
            {'userLat': '43.85', 'userLng': '18.40', 'radiusKm': radius}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['radiusKm'] == 50.0
        assert [item['id'] for item in response.data['results']] == [close.id]


@pytest.mark.django_db
class TestHomepageEndpoints:

    def test_featured_is_limited_and_visible_only(self, api_client, profile_factory, category_factory, settings):
        settings.DIRECTORY_FEATURED_LIMIT = 2
        first, second = profile_factory(), profile_factory()
        profile_factory()
        profile_factory(is_active=False)
        for name in ['Revizija', 'Porezi', 'Računovodstvo']:
            category_factory(name=name)

        response = api_client.get(reverse('directory-featured'))

        assert [item['id'] for item in response.data['profiles']] == [first.id, second.id]
        assert [c['name'] for c in response.data['categories']] == ['Porezi', 'Računovodstvo', 'Revizija']

    def test_filters_lists_options(self, api_client, sarajevo, payroll):
        response = api_client.get(reverse('directory-filters'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['entities'][0]['code'] == 'fbih'
        assert response.data['cities'][0]['name'] == 'Sarajevo'
        tree = response.data['categories']
        assert tree[0]['name'] == 'Računovodstvo'
        assert tree[0]['subcategories'] == [{'id': payroll.id, 'name': 'Payroll'}]

    def test_stats_count_only_visible(self, api_client, profile_factory, payroll):
        profile_factory(is_license_verified=True, services=[payroll])
        profile_factory()
        profile_factory(is_active=False, is_license_verified=True, services=[payroll])

        response = api_client.get(reverse('directory-stats'))

        assert response.data['total_profiles'] == 2
        assert response.data['verified_profiles'] == 1
        assert response.data['top_categories'][0]['profile_count'] == 1

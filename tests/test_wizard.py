"""
Tests for the onboarding wizard state machine.
"""

import pytest
from django.urls import reverse
from rest_framework import status

from directory.query import FilterRequest
from directory.services import search_profiles

LONG_DESCRIPTION = (
    "Certificirana računovotkinja sa petnaest godina iskustva u vođenju poslovnih "
    "knjiga, obračunu plata i poreznom savjetovanju za mala i srednja preduzeća."
)


def _step_url(step):
    return reverse('profile-wizard-step', kwargs={'step': step})


@pytest.fixture
def wizard_data(sarajevo, category_factory):
    accounting = category_factory(name='Računovodstvo')
    payroll = category_factory(name='Obračun plata', parent=accounting)
    return {
        1: {'first_name': 'Ana', 'last_name': 'Marić', 'phone': '061 123 456',
            'personal_street': 'Titova 1', 'personal_city': sarajevo.id},
        2: {'business_type': 'individual', 'business_city': sarajevo.id,
            'business_street': 'Ferhadija 5', 'tax_id': '4200000000000',
            'latitude': '43.856300', 'longitude': '18.413100'},
        3: {'services': [accounting.id, payroll.id]},
        4: {'working_hours': [
            {'day_of_week': d, 'is_closed': False, 'open_time': '08:00', 'close_time': '16:00'}
            for d in range(1, 6)
        ] + [{'day_of_week': 6, 'is_closed': True}, {'day_of_week': 7, 'is_closed': True}]},
        5: {'works_online': True, 'has_physical_office': True,
            'accepting_new_clients': True, 'years_experience': 15},
        6: {'references': [{'client_name': 'Pekara Klas', 'description': 'Knjigovodstvo od 2015.'}]},
        7: {'license_number': 'CR-1234', 'certificates': [
            {'name': 'Certificirani računovođa', 'issuer': 'SRRF', 'year': 2012}]},
        8: {'email': 'ana@example.com', 'website': 'https://ana.ba'},
        9: {'short_description': 'Računovodstvo za obrtnike i d.o.o.',
            'long_description': LONG_DESCRIPTION},
    }


def _complete(client, data, upto=9):
    for step in range(1, upto + 1):
        response = client.put(_step_url(step), data[step], format='json')
        assert response.status_code == status.HTTP_200_OK, (step, response.data)
    return response


@pytest.mark.django_db
class TestWizardFlow:

    def test_new_profile_is_hidden(self, owner_client):
        client, profile = owner_client

        assert profile.registration_step == 0
        assert not profile.registration_completed
        assert search_profiles(FilterRequest()) == []

    def test_full_flow_makes_profile_visible(self, owner_client, wizard_data):
        client, profile = owner_client

        response = _complete(client, wizard_data)

        assert response.data['registration_completed'] is True
        assert response.data['registration_step'] == 9
        profile.refresh_from_db()
        assert profile.phone == '+38761123456'
        assert profile.slug == 'ana-maric'
        assert profile.working_hours.count() == 7
        assert profile.profile_services.count() == 2
        assert [r.profile.id for r in search_profiles(FilterRequest())] == [profile.id]

    def test_skipping_ahead_is_rejected(self, owner_client, wizard_data):
        client, profile = owner_client

        response = client.put(_step_url(2), wizard_data[2], format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'step_not_allowed'
        profile.refresh_from_db()
        assert profile.registration_step == 0

    def test_unknown_step(self, owner_client):
        client, _ = owner_client

        response = client.put(_step_url(10), {}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_revisiting_keeps_progress(self, owner_client, wizard_data):
        client, profile = owner_client
        _complete(client, wizard_data, upto=3)

        response = client.put(_step_url(1), dict(wizard_data[1], first_name='Anela'), format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['registration_step'] == 3

    def test_renaming_completed_profile_refreshes_slug(self, owner_client, wizard_data):
        client, profile = owner_client
        wizard_data[1]['last_name'] = 'Marić Kovač'
        _complete(client, wizard_data)
        profile.refresh_from_db()
        assert profile.slug == 'ana-maric-kovac'

        client.put(_step_url(1), dict(wizard_data[1], last_name='Marić'), format='json')

        profile.refresh_from_db()
        assert profile.slug == 'ana-maric'

    def test_invalid_payload(self, owner_client):
        client, _ = owner_client

        response = client.put(_step_url(1), {'first_name': '', 'last_name': 'Marić'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'validation_error'
        assert 'first_name' in response.data['detail']

    def test_requires_authentication(self, api_client):
        response = api_client.put(_step_url(1), {}, format='json')
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestStepValidation:

    def test_company_requires_company_name(self, owner_client, wizard_data):
        client, _ = owner_client
        _complete(client, wizard_data, upto=1)

        response = client.put(_step_url(2), dict(wizard_data[2], business_type='company'), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'company_name' in response.data['detail']

    def test_services_need_at_least_one_known_category(self, owner_client, wizard_data):
        client, _ = owner_client
        _complete(client, wizard_data, upto=2)

        assert client.put(_step_url(3), {'services': []}, format='json').status_code == 400
        assert client.put(_step_url(3), {'services': [999999]}, format='json').status_code == 400

    def test_opening_must_precede_closing(self, owner_client, wizard_data):
        client, _ = owner_client
        _complete(client, wizard_data, upto=3)

        response = client.put(_step_url(4), {'working_hours': [
            {'day_of_week': 1, 'open_time': '16:00', 'close_time': '08:00'}
        ]}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_descriptions_length_rules(self, owner_client, wizard_data):
        client, _ = owner_client
        _complete(client, wizard_data, upto=8)

        too_long_short = client.put(_step_url(9), {
            'short_description': 'x' * 151, 'long_description': LONG_DESCRIPTION
        }, format='json')
        too_short_long = client.put(_step_url(9), {
            'short_description': 'Kratko', 'long_description': 'Premalo teksta.'
        }, format='json')

        assert too_long_short.status_code == status.HTTP_400_BAD_REQUEST
        assert too_short_long.status_code == status.HTTP_400_BAD_REQUEST

    def test_final_step_checks_required_data(self, owner_client, wizard_data):
        client, profile = owner_client
        _complete(client, wizard_data, upto=8)
        profile.profile_services.all().delete()

        response = client.put(_step_url(9), wizard_data[9], format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'incomplete_steps'
        assert response.data['detail']['missing'] == ['services']
        profile.refresh_from_db()
        assert not profile.registration_completed

    def test_changed_license_number_needs_new_verification(self, owner_client, wizard_data):
        client, profile = owner_client
        _complete(client, wizard_data, upto=7)
        profile.refresh_from_db()
        profile.is_license_verified = True
        profile.save()

        client.put(_step_url(7), dict(wizard_data[7], license_number='CR-9999'), format='json')

        profile.refresh_from_db()
        assert not profile.is_license_verified


@pytest.mark.django_db
def test_my_profile_shows_private_fields(owner_client, wizard_data):
    client, _ = owner_client
    _complete(client, wizard_data, upto=2)

    response = client.get(reverse('profile-me'))

    assert response.status_code == status.HTTP_200_OK
    assert response.data['tax_id'] == '4200000000000'
    assert response.data['registration_step'] == 2

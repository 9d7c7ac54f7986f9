"""
Tests for sign-up and login.
"""

import pytest
from django.urls import reverse
from rest_framework import status

from users.models import User
from users.utils import to_e164, is_valid_phone


@pytest.mark.django_db
class TestRegister:

    def test_register_opens_hidden_profile(self, api_client):
        response = api_client.post(reverse('user-register'), {
            'email': 'Ana@Example.com', 'password': 'Sigurna-lozinka-9',
            'first_name': 'Ana', 'last_name': 'Marić',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data
        user = User.objects.get(email='ana@example.com')
        assert user.role == 'professional'
        assert user.profile.slug == 'ana-maric'
        assert user.profile.is_active
        assert not user.profile.registration_completed
        assert response.data['user']['registration_step'] == 0

    def test_duplicate_email(self, api_client, user_factory):
        user_factory(email='ana@example.com')

        response = api_client.post(reverse('user-register'), {
            'email': 'ANA@example.com', 'password': 'Sigurna-lozinka-9',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'invalid_input'

    def test_weak_password(self, api_client):
        response = api_client.post(reverse('user-register'), {
            'email': 'new@example.com', 'password': '12345678',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestLogin:

    def test_login(self, api_client, user_factory):
        user_factory(email='pro@example.com', password='Sigurna-lozinka-9')

        response = api_client.post(reverse('user-login'), {
            'email': 'pro@example.com', 'password': 'Sigurna-lozinka-9'
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['email'] == 'pro@example.com'

    def test_wrong_password(self, api_client, user_factory):
        user_factory(email='pro@example.com', password='Sigurna-lozinka-9')

        response = api_client.post(reverse('user-login'), {
            'email': 'pro@example.com', 'password': 'pogresna'
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['code'] == 'invalid_credentials'


class TestPhoneNormalisation:

    @pytest.mark.parametrize('raw', ['061 123 456', '+387 61 123 456', '0038761123456', '061/123-456'])
    def test_bosnian_mobile(self, raw):
        assert to_e164(raw) == '+38761123456'

    @pytest.mark.parametrize('raw', ['', '123', 'telefon'])
    def test_invalid(self, raw):
        assert not is_valid_phone(raw)

"""
Test configuration - pytest fixtures and factory_boy factories

Factories build a minimal directory: entities, cities, service categories
and profiles in any visibility state.

RUNNING TESTS:
# Run all tests
pytest tests/ -v

# Run by module
pytest tests/test_search.py -v
"""

import uuid
from decimal import Decimal

import factory
import pytest
from factory.django import DjangoModelFactory
from rest_framework.test import APIClient


# ============================================================================
# USER FACTORIES
# ============================================================================

class UserFactory(DjangoModelFactory):
    """Factory for users.User (e-mail login)."""

    class Meta:
        model = 'users.User'

    email = factory.LazyAttribute(lambda o: f"user_{uuid.uuid4().hex[:8]}@example.com")
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    role = 'professional'
    is_active = True

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        password = kwargs.pop('password', 'testpass123')
        manager = cls._get_manager(model_class)
        return manager.create_user(*args, password=password, **kwargs)


class AdminUserFactory(UserFactory):
    role = 'admin'
    is_staff = True


# ============================================================================
# LOCATION FACTORIES
# ============================================================================

class EntityFactory(DjangoModelFactory):
    class Meta:
        model = 'locations.Entity'
        django_get_or_create = ('code',)

    code = factory.Sequence(lambda n: f"e{n}")
    name = factory.LazyAttribute(lambda o: f"Entity {o.code}")


class CantonFactory(DjangoModelFactory):
    class Meta:
        model = 'locations.Canton'

    entity = factory.SubFactory(EntityFactory)
    name = factory.Sequence(lambda n: f"Canton {n}")


class CityFactory(DjangoModelFactory):
    class Meta:
        model = 'locations.City'

    entity = factory.SubFactory(EntityFactory)
    name = factory.Sequence(lambda n: f"City {n}")
    postal_code = '71000'


# ============================================================================
# SERVICE FACTORIES
# ============================================================================

class ServiceCategoryFactory(DjangoModelFactory):
    class Meta:
        model = 'services.ServiceCategory'

    name = factory.Sequence(lambda n: f"Category {n}")
    parent = None
    is_active = True


# ============================================================================
# PROFILE FACTORIES
# ============================================================================

class ProfileFactory(DjangoModelFactory):
    """
    Publicly visible profile by default; pass is_active / registration_completed
    to build hidden ones.
    """

    class Meta:
        model = 'profiles.Profile'

    user = factory.SubFactory(UserFactory)
    slug = factory.Sequence(lambda n: f"profil-{n}")
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    business_type = 'individual'
    short_description = 'Knjigovodstvene usluge'
    business_city = factory.SubFactory(CityFactory)
    accepting_new_clients = True
    is_license_verified = False
    is_active = True
    registration_completed = True
    registration_step = 9

    @factory.post_generation
    def services(self, create, extracted, **kwargs):
        if not create or not extracted:
            return
        for category in extracted:
            ProfileServiceFactory(profile=self, category=category)


class ProfileServiceFactory(DjangoModelFactory):
    class Meta:
        model = 'profiles.ProfileService'

    profile = factory.SubFactory(ProfileFactory)
    category = factory.SubFactory(ServiceCategoryFactory)


# ============================================================================
# BLOG FACTORIES
# ============================================================================

class BlogCategoryFactory(DjangoModelFactory):
    class Meta:
        model = 'blog.BlogCategory'

    name = factory.Sequence(lambda n: f"Blog category {n}")


class BlogTagFactory(DjangoModelFactory):
    class Meta:
        model = 'blog.BlogTag'

    name = factory.Sequence(lambda n: f"tag{n}")


class BlogPostFactory(DjangoModelFactory):
    class Meta:
        model = 'blog.BlogPost'

    title = factory.Sequence(lambda n: f"Post {n}")
    excerpt = 'Kratak uvod'
    content = '<p>Sadržaj članka</p>'
    is_published = True


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def user_factory(db):
    return UserFactory


@pytest.fixture
def admin_user_factory(db):
    return AdminUserFactory


@pytest.fixture
def entity_factory(db):
    return EntityFactory


@pytest.fixture
def canton_factory(db):
    return CantonFactory


@pytest.fixture
def city_factory(db):
    return CityFactory


@pytest.fixture
def category_factory(db):
    return ServiceCategoryFactory


@pytest.fixture
def profile_factory(db):
    return ProfileFactory


@pytest.fixture
def blog_post_factory(db):
    return BlogPostFactory


@pytest.fixture
def blog_category_factory(db):
    return BlogCategoryFactory


@pytest.fixture
def blog_tag_factory(db):
    return BlogTagFactory


@pytest.fixture
def sarajevo(db):
    fbih = EntityFactory(code='fbih', name='Federacija Bosne i Hercegovine')
    return CityFactory(
        entity=fbih, name='Sarajevo', postal_code='71000',
        latitude=Decimal('43.856300'), longitude=Decimal('18.413100'),
    )


@pytest.fixture
def banja_luka(db):
    rs = EntityFactory(code='rs', name='Republika Srpska')
    return CityFactory(
        entity=rs, name='Banja Luka', postal_code='78000',
        latitude=Decimal('44.772200'), longitude=Decimal('17.191000'),
    )


@pytest.fixture
def api_client():
    """Anonymous API client."""
    return APIClient()


@pytest.fixture
def staff_client(db):
    """API client authenticated as a staff user."""
    client = APIClient()
    user = AdminUserFactory()
    client.force_authenticate(user=user)
    return client, user


@pytest.fixture
def owner_client(db):
    """
    API client of a professional who just signed up: empty profile,
    registration not started.
    """
    from profiles.services import create_minimal_profile

    client = APIClient()
    user = UserFactory(first_name='Ana', last_name='Marić')
    profile = create_minimal_profile(user)
    client.force_authenticate(user=user)
    return client, profile

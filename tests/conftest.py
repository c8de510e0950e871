"""
Test configuration for the school points server.
"""
import pytest
from django.core.cache import cache
from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def clear_cache():
    """Verification codes live in the cache; start every test empty."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def fresh_plugin_manager():
    from apps.plugins.manager import reset_plugin_manager

    reset_plugin_manager()
    yield
    reset_plugin_manager()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def student(db):
    from tests.factories import StudentFactory
    return StudentFactory()


@pytest.fixture
def admin_user(db):
    from tests.factories import UserFactory
    return UserFactory(roles=['admin'])


@pytest.fixture
def product(db):
    from tests.factories import ProductFactory
    return ProductFactory(points_required=100, stock=5)

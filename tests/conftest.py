import pytest
from fastapi.testclient import TestClient

from catalog_api.api import create_app
from catalog_api.repos.catalog_repo import CatalogStore
from catalog_api.utils.settings import CatalogProfile


@pytest.fixture
def store():
    return CatalogStore()


@pytest.fixture
def make_client():
    def _make(**profile_kwargs):
        app = create_app(profile=CatalogProfile(**profile_kwargs))
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()

import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# app.main builds the app at import time
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")

from app.core.config import Settings  # noqa: E402
from app.infrastructure.db.supabase_client import get_admin_client_factory  # noqa: E402
from app.main import create_app  # noqa: E402
from tests.mocks import MockSupabaseClient  # noqa: E402


@pytest.fixture
def settings():
    return Settings(supabase_url="http://localhost:54321", service_role_key="test-service-role-key")


@pytest.fixture
def backend():
    return MockSupabaseClient()


@pytest.fixture
def make_client(backend, settings):
    default_settings = settings

    def _make(settings=None, client_factory=None):
        app = create_app(settings or default_settings)
        factory = client_factory or (lambda: backend)
        app.dependency_overrides[get_admin_client_factory] = lambda: factory
        return TestClient(app)
    return _make

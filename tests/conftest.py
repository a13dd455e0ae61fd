import pytest

from app.config import Settings
from tests.fakes import API_BASE, API_ROOT, FakeWordPress


@pytest.fixture
def wp() -> FakeWordPress:
    backend = FakeWordPress()
    # Target of the availability probe
    backend.add(f"{API_ROOT}/posts", json=[])
    return backend


@pytest.fixture
def settings() -> Settings:
    return Settings(wordpress_api_url=API_BASE)

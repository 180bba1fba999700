import pytest

from gw2_client.config import reload_settings


@pytest.fixture(autouse=True)
def _reset_settings():
    """Drop the cached settings so env changes made by a test never leak into the next."""
    reload_settings()
    yield
    reload_settings()

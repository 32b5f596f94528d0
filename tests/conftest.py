import pytest

from equipment_search.sources.fallback import SampleCatalogFallback

from helpers import mock_client


@pytest.fixture
def catalog_fallback():
    return SampleCatalogFallback(simulate_delay=False)


@pytest.fixture
def offline_client():
    def handler(request):
        raise AssertionError(f"unexpected request to {request.url}")

    return mock_client(handler)

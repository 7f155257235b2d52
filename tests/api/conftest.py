"""
Pytest configuration for API integration tests
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="function")
def client():
    """
    Create a test client with properly initialized app state.
    Each test gets a fresh client to avoid state contamination.
    """
    from core.raster_store import RasterStore
    from main import app

    raster_store = RasterStore(max_rasters=10)

    # Create test config
    test_config = {
        "system": {"log_level": "INFO", "debug": False},
        "processing": {"histogram_workers": 2, "default_bin_count": 16},
    }

    # Set in app state
    app.state.raster_store = raster_store
    app.state.config = test_config

    # Create test client (no context manager so lifespan does not replace the store)
    test_client = TestClient(app, raise_server_exceptions=False)

    yield test_client

    raster_store.clear()


@pytest.fixture
def uploaded_raster_id(client, quadrant_png_base64):
    """Upload the quadrant raster and return its ID"""
    response = client.post(
        "/api/raster/upload", json={"image_base64": quadrant_png_base64, "name": "quadrants"}
    )
    assert response.status_code == 200
    return response.json()["id"]

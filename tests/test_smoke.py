"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify the package and its settings can be imported."""
    from device_catalog.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "seed_defaults")


def test_application_routes_registered():
    from device_catalog.main import app

    paths = {route.path for route in app.routes}
    assert "/" in paths
    assert "/device-types" in paths
    assert "/device-models/{name}" in paths
    assert "/devices/{mac_address}" in paths

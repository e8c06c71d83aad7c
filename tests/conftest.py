import json
import pytest
from datetime import date
from app import create_app
from pricing_tracker.config_service import ConfigManager


@pytest.fixture
def config_file(tmp_path):
    """Fixture for a config.json with the standard detection settings."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "detection": {
            "preferred_sheets": ["Line List", "Sheet1", "LDP Requests"],
            "header_rows": {"LDP Requests": 11},
            "preview_rows": 3,
        }
    }), encoding="utf-8")
    return path


@pytest.fixture
def config_manager(config_file):
    """Fixture for initializing ConfigManager from the temporary config file."""
    return ConfigManager(str(config_file))


@pytest.fixture
def app(config_manager):
    """Fixture for the Flask app in testing mode."""
    app = create_app('Testing', config_manager=config_manager)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Fixture for the Flask test client."""
    return app.test_client()


@pytest.fixture
def sales_headers():
    return ["Revenue", "Units Current Booked", "Customer Name", "Customer Type", "Ship Date"]


@pytest.fixture
def line_list_headers():
    return ["Style #", "Style Desc", "MSRP", "Wholesale", "Category", "Division"]


@pytest.fixture
def pricing_headers():
    return ["Style", "Color", "Season", "Sea Desc", "Price", "MSRP"]


@pytest.fixture
def spring_26_dates():
    """Reference dates around the 26SP calendar and the status each should give."""
    return {
        date(2025, 1, 1): "PLANNING",
        date(2025, 5, 31): "PLANNING",
        date(2025, 6, 1): "PRE-BOOK",
        date(2026, 1, 1): "PRE-BOOK",
        date(2026, 2, 14): "PRE-BOOK",
        date(2026, 2, 15): "SHIPPING",
        date(2026, 3, 1): "SHIPPING",
        date(2026, 8, 14): "SHIPPING",
        date(2026, 8, 15): "CLOSED",
        date(2026, 9, 1): "CLOSED",
    }

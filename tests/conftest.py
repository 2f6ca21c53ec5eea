"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import sys
import os
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
import pytest

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Mock config module completely before any imports
config_mock = MagicMock()
config_mock.API_URL = "https://backend.test"
config_mock.API_TIMEOUT_SECONDS = 30
config_mock.CHARGES_DEBOUNCE_SECONDS = 0.01
config_mock.DEFAULT_LOADING_FEE = "1000"
config_mock.DEFAULT_WOOD_PACKAGING = "1500"
config_mock.DEFAULT_TRANSPORT_ADVANCE = "15000"
config_mock.DEFAULT_GST_RATE = "18"
config_mock.DEFAULT_PAYMENT_METHOD = "bank_transfer"
config_mock.FOLLOW_UP_COMMENT_MAX_LENGTH = 500
config_mock.LANGUAGE = "en"  # For Localizator
config_mock.CURRENCY_SYMBOL = "₹"
config_mock.LOG_LEVEL = "INFO"
config_mock.LOG_MASK_SECRETS = True
config_mock.LOG_RETENTION_DAYS = 5

sys.modules['config'] = config_mock

from models.cartItem import CartItemDTO, CommissionInfoDTO
from models.charges import ChargesConfig


# ============================================================================
# API Fixtures
# ============================================================================

@pytest.fixture
def mock_api_client():
    """StorefrontApiClient replacement; set return values per HTTP verb."""
    client = MagicMock()
    client.get = AsyncMock(return_value={"success": True, "data": {}})
    client.post = AsyncMock(return_value={"success": True, "data": {}})
    client.put = AsyncMock(return_value={"success": True, "data": {}})
    client.patch = AsyncMock(return_value={"success": True, "data": {}})
    client.delete = AsyncMock(return_value={"success": True, "data": {}})
    return client


# ============================================================================
# Cart Fixtures
# ============================================================================

@pytest.fixture
def granite_item():
    """Catalog-priced line, no commission, no custom specs."""
    return CartItemDTO(
        id="line-1",
        post_id="prod-granite",
        name="Black Galaxy Granite",
        category="Granite",
        price=Decimal("500"),
        quantity=200,
    )


@pytest.fixture
def marble_item():
    """Line priced by the backend with agent commission and custom specs."""
    return CartItemDTO(
        id="line-2",
        post_id="prod-marble",
        name="Statuario Marble",
        category="Marble",
        price=Decimal("5000"),
        base_price=Decimal("5000"),
        updated_price=Decimal("5750"),
        quantity=2,
        custom_quantity=120,
        custom_finish="Polished",
        custom_thickness="20",
        commission_info=CommissionInfoDTO(total_commission=Decimal("15")),
    )


@pytest.fixture
def default_charges():
    return ChargesConfig(
        loading_fee=Decimal("1000"),
        wood_packaging=Decimal("1500"),
        transport_advance=Decimal("15000"),
        gst_rate_percent=Decimal("18"),
    )

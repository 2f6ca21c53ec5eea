"""
Unit tests for Localizator.get_text().

Tests cover:
- Dashboard section lookup with fallback to the common section
- Unknown keys
- Every error message key used by the error handler exists
"""

import pytest

from enums.dashboard import Dashboard
from utils.localizator import Localizator


class TestGetText:

    def test_common_key(self):
        assert Localizator.get_text(Dashboard.COMMON, "charges_total") == "Total"

    @pytest.mark.parametrize("entity", [Dashboard.CLIENT, Dashboard.AGENT, Dashboard.ADMIN])
    def test_falls_back_to_common(self, entity):
        assert Localizator.get_text(entity, "error_empty_cart") == "Your cart is empty"

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            Localizator.get_text(Dashboard.CLIENT, "no_such_key")

    def test_explicit_language(self):
        assert Localizator.get_text(Dashboard.COMMON, "charges_insurance_manual", lang="en") == "manual"

    @pytest.mark.parametrize("key", [
        "error_authentication_required",
        "error_authentication_failed",
        "error_api_request",
        "error_api_connection",
        "error_api_response",
        "error_charges_update_failed",
        "error_empty_cart",
        "error_cart_item_not_found",
        "error_invalid_quantity",
        "error_order_not_found",
        "error_order_placement",
        "error_follow_up_invalid",
        "error_agent_partial_update",
        "error_unexpected",
    ])
    def test_error_keys_present(self, key):
        assert Localizator.get_text(Dashboard.COMMON, key)

"""
Unit Tests: OrderService

Tests for services/order.py covering:
- get_order() - direct lookup and fallback to the client's order list
- compute_totals() - recomputation with the cart formula, drift reporting
"""

from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest

from exceptions.api import (
    ApiConnectionException,
    ApiRequestException,
    ApiResponseException,
    AuthenticationFailedException,
)
from exceptions.order import OrderNotFoundException
from models.order import OrderDTO
from services.order import OrderService


def order_payload(order_id: str = "ORD-1001", total_amount: int = 139057, additional_charges: dict | None = None):
    payload = {
        "orderId": order_id,
        "items": [{"_id": "l1", "postId": "prod-granite", "name": "Black Galaxy Granite",
                   "price": 500, "quantity": 200}],
        "totalAmount": total_amount,
        "status": "pending",
        "paymentStatus": "unpaid",
        "createdAt": "2026-03-10T09:30:00Z",
    }
    if additional_charges is not None:
        payload["additionalCharges"] = additional_charges
    return payload


STORED_CHARGES = {
    "loadingFee": 1000,
    "woodPackaging": 1500,
    "insurance": 345,
    "transportAdvance": 15000,
    "gstRate": 18,
    "gstAmount": 21212,
}


class TestGetOrder:

    @pytest.mark.asyncio
    async def test_direct_lookup(self, mock_api_client):
        with patch('services.order.OrderRepository.get_by_id', new_callable=AsyncMock,
                   return_value={"success": True, "data": order_payload()}), \
             patch('services.order.OrderRepository.get_by_client', new_callable=AsyncMock) as mock_by_client:
            order = await OrderService.get_order(mock_api_client, "ORD-1001", "client-7")

        assert order.order_id == "ORD-1001"
        assert order.total_amount == Decimal("139057")
        mock_by_client.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_falls_back_when_endpoint_unreachable(self, mock_api_client):
        with patch('services.order.OrderRepository.get_by_id', new_callable=AsyncMock,
                   side_effect=ApiConnectionException("/api/orders/ORD-1002", "timeout")), \
             patch('services.order.OrderRepository.get_by_client', new_callable=AsyncMock,
                   return_value={"success": True, "data": [order_payload("ORD-1001"), order_payload("ORD-1002")]}):
            order = await OrderService.get_order(mock_api_client, "ORD-1002", "client-7")

        assert order.order_id == "ORD-1002"

    @pytest.mark.asyncio
    async def test_falls_back_on_404(self, mock_api_client):
        with patch('services.order.OrderRepository.get_by_id', new_callable=AsyncMock,
                   side_effect=ApiRequestException("/api/orders/ORD-1001", 404, "Not found")), \
             patch('services.order.OrderRepository.get_by_client', new_callable=AsyncMock,
                   return_value=[order_payload("ORD-1001")]) as mock_by_client:
            order = await OrderService.get_order(mock_api_client, "ORD-1001", "client-7")

        mock_by_client.assert_awaited_once_with("client-7", mock_api_client)
        assert order.order_id == "ORD-1001"

    @pytest.mark.asyncio
    async def test_server_error_not_swallowed(self, mock_api_client):
        with patch('services.order.OrderRepository.get_by_id', new_callable=AsyncMock,
                   side_effect=ApiRequestException("/api/orders/ORD-1001", 500, "boom")):
            with pytest.raises(ApiRequestException):
                await OrderService.get_order(mock_api_client, "ORD-1001", "client-7")

    @pytest.mark.asyncio
    async def test_auth_failure_not_swallowed(self, mock_api_client):
        with patch('services.order.OrderRepository.get_by_id', new_callable=AsyncMock,
                   side_effect=AuthenticationFailedException("/api/orders/ORD-1001")):
            with pytest.raises(AuthenticationFailedException):
                await OrderService.get_order(mock_api_client, "ORD-1001", "client-7")

    @pytest.mark.asyncio
    async def test_not_in_client_orders(self, mock_api_client):
        with patch('services.order.OrderRepository.get_by_id', new_callable=AsyncMock,
                   side_effect=ApiConnectionException("/api/orders/ORD-9", "timeout")), \
             patch('services.order.OrderRepository.get_by_client', new_callable=AsyncMock,
                   return_value={"success": True, "data": [order_payload("ORD-1001")]}):
            with pytest.raises(OrderNotFoundException) as exc_info:
                await OrderService.get_order(mock_api_client, "ORD-9", "client-7")

        assert exc_info.value.details["order_id"] == "ORD-9"

    @pytest.mark.asyncio
    async def test_malformed_order_raises_response_error(self, mock_api_client):
        broken = order_payload()
        broken["items"][0]["quantity"] = "many"

        with patch('services.order.OrderRepository.get_by_id', new_callable=AsyncMock,
                   return_value={"success": True, "data": broken}):
            with pytest.raises(ApiResponseException) as exc_info:
                await OrderService.get_order(mock_api_client, "ORD-1001", "client-7")

        assert exc_info.value.path == "/api/orders/ORD-1001"

    @pytest.mark.asyncio
    async def test_list_client_orders(self, mock_api_client):
        with patch('services.order.OrderRepository.get_by_client', new_callable=AsyncMock,
                   return_value={"success": True, "data": [order_payload("ORD-1"), order_payload("ORD-2")]}):
            orders = await OrderService.list_client_orders(mock_api_client, "client-7")

        assert [order.order_id for order in orders] == ["ORD-1", "ORD-2"]


class TestComputeTotals:

    def test_matches_stored_total(self):
        order = OrderDTO.model_validate(order_payload(additional_charges=STORED_CHARGES))

        totals = OrderService.compute_totals(order)

        assert totals.items_subtotal == Decimal("100000")
        assert totals.recomputed.total_amount == Decimal("139057")
        assert totals.stored_tax == Decimal("21212")
        assert totals.drift == Decimal("0")

    def test_reports_drift(self, caplog):
        order = OrderDTO.model_validate(order_payload(total_amount=139060, additional_charges=STORED_CHARGES))

        totals = OrderService.compute_totals(order)

        assert totals.drift == Decimal("3")
        assert "differs from recomputed" in caplog.text

    def test_order_without_charges(self):
        order = OrderDTO.model_validate(order_payload(total_amount=100000))

        totals = OrderService.compute_totals(order)

        assert totals.items_subtotal == Decimal("100000")
        assert totals.recomputed is None
        assert totals.drift is None

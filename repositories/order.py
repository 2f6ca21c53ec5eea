from typing import Any

from api import StorefrontApiClient
from models.order import CreateOrderRequestDTO


class OrderRepository:
    @staticmethod
    async def create(order_request: CreateOrderRequestDTO, follow_up_payload: dict | None,
                     client: StorefrontApiClient) -> dict:
        payload = await client.post("/api/createOrder", {
            "shippingAddress": order_request.shipping_address.model_dump(by_alias=True),
            "paymentMethod": order_request.payment_method,
            "notes": order_request.notes,
            "followUpReminder": follow_up_payload,
        })
        return payload.get("data") or payload

    @staticmethod
    async def get_by_id(order_id: str, client: StorefrontApiClient) -> Any:
        return await client.get(f"/api/orders/{order_id}")

    @staticmethod
    async def get_by_client(client_id: str, client: StorefrontApiClient) -> Any:
        return await client.get(f"/api/clients/{client_id}/orders")

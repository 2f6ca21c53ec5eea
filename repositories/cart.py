import logging

from api import StorefrontApiClient, parse_payload
from models.cart import CartDTO
from models.charges import ChargesConfig

logger = logging.getLogger(__name__)


class CartRepository:
    @staticmethod
    async def get(client: StorefrontApiClient) -> CartDTO:
        payload = await client.get("/api/getUserCart")
        data = payload.get("data") or {}

        # Lines without a product id cannot be edited or removed, skip them
        raw_items = data.get("items") or []
        valid_items = [item for item in raw_items
                       if isinstance(item, dict) and isinstance(item.get("postId"), str) and item.get("postId")]
        if len(valid_items) != len(raw_items):
            logger.warning(f"Dropped {len(raw_items) - len(valid_items)} cart items without postId")

        return parse_payload(CartDTO, {
            "items": valid_items,
            "additionalCharges": data.get("additionalCharges"),
        }, "/api/getUserCart")

    @staticmethod
    async def update_additional_charges(charges: ChargesConfig, client: StorefrontApiClient) -> dict:
        payload = await client.post("/api/updateCartAdditionalCharges", charges.to_update_payload())
        return payload.get("data") or {}

    @staticmethod
    async def add_item(product_id: str, quantity: int, client: StorefrontApiClient):
        await client.post("/api/addToCart", {"productId": product_id, "quantity": quantity})

    @staticmethod
    async def delete_item(product_id: str, client: StorefrontApiClient):
        await client.delete("/api/deleteUserCartItem", {"productId": product_id})

    @staticmethod
    async def update_item(product_id: str,
                          custom_quantity: int | None,
                          custom_finish: str | None,
                          custom_thickness: str | None,
                          client: StorefrontApiClient):
        await client.put("/api/updateCartItem", {
            "productId": product_id,
            "customQuantity": custom_quantity,
            "customFinish": custom_finish,
            "customThickness": custom_thickness,
        })

    @staticmethod
    async def clear(client: StorefrontApiClient):
        await client.post("/api/clearCart", {})

    @staticmethod
    async def save_follow_up(follow_up_reminder: dict, client: StorefrontApiClient) -> str | None:
        payload = await client.post("/api/client/cart-followup", {"followUpReminder": follow_up_reminder})
        data = payload.get("data") or {}
        return data.get("id")

import logging
from datetime import date
from decimal import Decimal

import config
from api import StorefrontApiClient
from enums.gst_rate import GstRate
from enums.wood_packaging import WoodPackagingTier
from exceptions.cart import CartItemNotFoundException, EmptyCartException, InvalidQuantityException
from exceptions.order import OrderPlacementException
from models.cart import CartSummaryDTO
from models.cartItem import CartItemDTO
from models.charges import ChargesConfig
from models.follow_up import FollowUpReminderDTO
from models.order import CreateOrderRequestDTO, OrderConfirmationDTO, ShippingAddressDTO
from repositories.cart import CartRepository
from repositories.order import OrderRepository
from services.charges import ChargesCalculator
from services.follow_up import FollowUpService

# Charge fields a user may edit on the cart page
EDITABLE_CHARGES = ("loading_fee", "wood_packaging", "insurance_override", "transport_advance", "gst_rate_percent")


class CartService:

    @staticmethod
    def default_charges() -> ChargesConfig:
        """Charges used when the backend has none stored for the cart."""
        return ChargesConfig(
            loading_fee=Decimal(config.DEFAULT_LOADING_FEE),
            wood_packaging=Decimal(config.DEFAULT_WOOD_PACKAGING),
            insurance_override=None,
            transport_advance=Decimal(config.DEFAULT_TRANSPORT_ADVANCE),
            gst_rate_percent=Decimal(config.DEFAULT_GST_RATE),
        )

    @staticmethod
    def charge_options() -> dict[str, list]:
        """Preset choices offered by the charges editor; custom amounts stay allowed."""
        return {
            "wood_packaging": list(WoodPackagingTier),
            "gst_rate_percent": list(GstRate),
        }

    @staticmethod
    def summarize(items: list[CartItemDTO], charges: ChargesConfig) -> CartSummaryDTO:
        """Recompute totals for items + charges. Every cart/order view goes through here."""
        totals = ChargesCalculator.compute_totals([item.to_line_item() for item in items], charges)
        return CartSummaryDTO(items=items, charges=charges, totals=totals)

    @staticmethod
    async def load_cart(client: StorefrontApiClient) -> CartSummaryDTO:
        cart = await CartRepository.get(client)
        if cart.additional_charges is not None:
            charges = cart.additional_charges.to_config()
        else:
            charges = CartService.default_charges()
        summary = CartService.summarize(cart.items, charges)
        logging.debug(f"Cart loaded: {len(summary.items)} items, total={summary.totals.total_amount}")
        return summary

    @staticmethod
    def edit_charges(summary: CartSummaryDTO, **changes) -> CartSummaryDTO:
        """
        Apply user edits to the charges and recompute totals synchronously.

        Negative amounts are clamped to 0; an insurance override of 0 (or None)
        switches insurance back to auto-calculation.

        Example:
            summary = CartService.edit_charges(summary, wood_packaging=WoodPackagingTier.PREMIUM)
            sync_service.schedule(summary.charges)
        """
        unknown = set(changes) - set(EDITABLE_CHARGES)
        if unknown:
            raise TypeError(f"Unknown charge fields: {', '.join(sorted(unknown))}")

        updated = summary.charges.model_dump()
        for field, value in changes.items():
            if value is not None and field != "gst_rate_percent":
                value = max(Decimal(str(getattr(value, "value", value))), Decimal("0"))
            updated[field] = value
        if updated["insurance_override"] is not None and updated["insurance_override"] == 0:
            updated["insurance_override"] = None

        return CartService.summarize(summary.items, ChargesConfig.model_validate(updated))

    @staticmethod
    def _get_item(summary: CartSummaryDTO, product_id: str) -> CartItemDTO:
        item = summary.find_item(product_id)
        if item is None:
            raise CartItemNotFoundException(product_id)
        return item

    @staticmethod
    async def update_quantity(client: StorefrontApiClient, summary: CartSummaryDTO,
                              product_id: str, quantity: int) -> CartSummaryDTO:
        """
        Change the quantity of one line.

        The backend has no quantity endpoint, so the line is removed and added
        again. If adding fails after the removal the line stays removed on the
        backend (no rollback).
        """
        if quantity < 1:
            raise InvalidQuantityException(product_id, quantity)
        CartService._get_item(summary, product_id)

        await CartRepository.delete_item(product_id, client)
        await CartRepository.add_item(product_id, quantity, client)

        items = [
            item.model_copy(update={"quantity": quantity}) if item.post_id == product_id else item
            for item in summary.items
        ]
        return CartService.summarize(items, summary.charges)

    @staticmethod
    async def remove_item(client: StorefrontApiClient, summary: CartSummaryDTO, product_id: str) -> CartSummaryDTO:
        CartService._get_item(summary, product_id)
        await CartRepository.delete_item(product_id, client)
        items = [item for item in summary.items if item.post_id != product_id]
        return CartService.summarize(items, summary.charges)

    @staticmethod
    async def update_custom_fields(client: StorefrontApiClient, summary: CartSummaryDTO, product_id: str,
                                   custom_quantity: int | None = None,
                                   custom_finish: str | None = None,
                                   custom_thickness: str | None = None) -> CartSummaryDTO:
        """Save custom specs for a line; a custom quantity also becomes the line quantity."""
        item = CartService._get_item(summary, product_id)
        if custom_quantity is not None and custom_quantity < 1:
            raise InvalidQuantityException(product_id, custom_quantity)

        await CartRepository.update_item(product_id, custom_quantity, custom_finish, custom_thickness, client)

        updated_item = item.model_copy(update={
            "custom_quantity": custom_quantity,
            "custom_finish": custom_finish,
            "custom_thickness": custom_thickness,
            "quantity": custom_quantity or item.quantity,
        })
        items = [updated_item if line.post_id == product_id else line for line in summary.items]
        return CartService.summarize(items, summary.charges)

    @staticmethod
    async def clear_cart(client: StorefrontApiClient, summary: CartSummaryDTO) -> CartSummaryDTO:
        await CartRepository.clear(client)
        logging.info("Cart cleared")
        return CartService.summarize([], summary.charges)

    @staticmethod
    async def checkout(client: StorefrontApiClient, summary: CartSummaryDTO,
                       shipping_address: ShippingAddressDTO,
                       payment_method: str | None = None,
                       notes: str = "",
                       follow_up_reminder: FollowUpReminderDTO | None = None,
                       today: date | None = None) -> OrderConfirmationDTO:
        """
        Place an order for the current cart.

        The backend computes and persists the order from its own copy of the
        cart; the local totals are only what the user saw.

        Raises:
            EmptyCartException: Cart has no items
            InvalidFollowUpException: Reminder enabled but invalid
            OrderPlacementException: Backend answered without an order id
        """
        if summary.is_empty:
            raise EmptyCartException()

        if follow_up_reminder is not None:
            FollowUpService.validate(follow_up_reminder, today)

        order_request = CreateOrderRequestDTO(
            shipping_address=shipping_address,
            payment_method=payment_method or config.DEFAULT_PAYMENT_METHOD,
            notes=notes,
            follow_up_reminder=follow_up_reminder,
        )
        data = await OrderRepository.create(
            order_request,
            FollowUpService.to_checkout_payload(follow_up_reminder, today),
            client
        )

        order_id = data.get("orderId") if isinstance(data, dict) else None
        if not order_id:
            raise OrderPlacementException("no order id in response")

        logging.info(f"Order placed: {order_id} ({len(summary.items)} items, shown total {summary.totals.total_amount})")
        return OrderConfirmationDTO(order_id=str(order_id), message=data.get("message"))

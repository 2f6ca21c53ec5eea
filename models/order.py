from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.cartItem import CartItemDTO
from models.charges import AdditionalChargesDTO, ChargesResult
from models.follow_up import FollowUpReminderDTO


class ShippingAddressDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None


class CreateOrderRequestDTO(BaseModel):
    """Input of a checkout; serialized to the POST /api/createOrder body by OrderRepository."""
    shipping_address: ShippingAddressDTO
    payment_method: str
    notes: str = ""
    follow_up_reminder: FollowUpReminderDTO | None = None


class OrderConfirmationDTO(BaseModel):
    order_id: str
    message: str | None = None


class OrderDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    order_id: str
    items: list[CartItemDTO] = Field(default_factory=list)
    total_amount: Decimal = Decimal("0")
    status: str | None = None
    payment_status: str | None = None
    created_at: datetime | None = None
    shipping_address: ShippingAddressDTO | None = None
    additional_charges: AdditionalChargesDTO | None = None


class OrderTotalsDTO(BaseModel):
    """
    Totals of a stored order next to the same totals recomputed locally.

    Both values are shown by the order pages. The backend record stays the
    source of truth; drift is reported, never corrected.
    """
    order_id: str
    items_subtotal: Decimal
    stored_total: Decimal
    stored_tax: Decimal | None = None
    recomputed: ChargesResult | None = None

    @property
    def drift(self) -> Decimal | None:
        if self.recomputed is None:
            return None
        return self.stored_total - self.recomputed.total_amount

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.charges import LineItem


class CommissionInfoDTO(BaseModel):
    """Commission breakdown the backend attaches to agent-adjusted prices (percentages)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    current_agent_commission: Decimal = Decimal("0")
    consultant_level_commission: Decimal = Decimal("0")
    total_commission: Decimal = Decimal("0")
    consultant_level: str | None = None


class CartItemDTO(BaseModel):
    """
    A product line in a cart or an order.

    price is the catalog price, updated_price the backend-calculated price
    after agent commission. This client never computes commission itself.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None = Field(default=None, alias="_id")
    post_id: str | None = None
    name: str = ""
    category: str | None = None
    image: list[str] = Field(default_factory=list)
    price: Decimal = Field(default=Decimal("0"), ge=0)
    base_price: Decimal | None = None
    updated_price: Decimal | None = None
    quantity: int = Field(default=1, ge=1)
    custom_quantity: int | None = None  # sqft
    custom_finish: str | None = None
    custom_thickness: str | None = None  # mm
    commission_info: CommissionInfoDTO | None = None

    @property
    def display_price(self) -> Decimal:
        """Resolved price shown to the client: updated price when present and non-zero."""
        return self.updated_price or self.price

    @property
    def original_price(self) -> Decimal:
        return self.base_price or self.price

    @property
    def has_commission(self) -> bool:
        return bool(self.updated_price) and self.updated_price != self.price

    @property
    def has_custom_specs(self) -> bool:
        return bool(self.custom_quantity or self.custom_finish or self.custom_thickness)

    @property
    def line_total(self) -> Decimal:
        return self.display_price * self.quantity

    def to_line_item(self) -> LineItem:
        return LineItem(unit_price=self.display_price, quantity=self.quantity)

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from enums.wood_packaging import WoodPackagingTier


def to_json_number(value: Decimal) -> int | float:
    """Decimal -> JSON number (int when integral, the backend stores whole rupees)."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


class LineItem(BaseModel):
    """One priced cart line: an already commission-adjusted unit price times a quantity."""
    model_config = ConfigDict(frozen=True)

    unit_price: Decimal = Field(ge=0)
    quantity: int = Field(ge=1)


class ChargesConfig(BaseModel):
    """
    Additional charges the user edits on the cart page.

    wood_packaging accepts a WoodPackagingTier or any custom non-negative
    amount. insurance_override is used verbatim when present and > 0,
    otherwise insurance is auto-calculated from the items subtotal.
    """
    model_config = ConfigDict(frozen=True)

    loading_fee: Decimal = Field(default=Decimal("0"), ge=0)
    wood_packaging: Decimal = Field(default=Decimal("0"), ge=0)
    insurance_override: Decimal | None = Field(default=None, ge=0)
    transport_advance: Decimal = Field(default=Decimal("0"), ge=0)
    gst_rate_percent: Decimal = Decimal("0")

    @field_validator("wood_packaging", "gst_rate_percent", mode="before")
    @classmethod
    def _enum_to_value(cls, value):
        if isinstance(value, Enum):
            return value.value
        return value

    @property
    def wood_packaging_tier(self) -> WoodPackagingTier | None:
        return WoodPackagingTier.from_amount(self.wood_packaging)

    @property
    def has_insurance_override(self) -> bool:
        return self.insurance_override is not None and self.insurance_override > 0

    def to_update_payload(self) -> dict:
        """
        Body for POST /api/updateCartAdditionalCharges.

        insurance is only sent when it was set manually, so the backend keeps
        auto-calculating it otherwise.
        """
        payload = {
            "loadingFee": to_json_number(self.loading_fee),
            "woodPackaging": to_json_number(self.wood_packaging),
            "transportAdvance": to_json_number(self.transport_advance),
            "gstRate": to_json_number(self.gst_rate_percent),
        }
        if self.has_insurance_override:
            payload["insurance"] = to_json_number(self.insurance_override)
        return payload


class ChargesResult(BaseModel):
    """Totals derived from items + ChargesConfig. Never persisted by this client."""
    model_config = ConfigDict(frozen=True)

    items_subtotal: Decimal
    insurance: Decimal
    subtotal_before_tax: Decimal
    tax_amount: Decimal
    total_amount: Decimal


class AdditionalChargesDTO(BaseModel):
    """additionalCharges object as stored on carts and orders by the backend."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    loading_fee: Decimal = Decimal("0")
    wood_packaging: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")
    transport_advance: Decimal = Decimal("0")
    gst_rate: Decimal = Decimal("0")
    gst_amount: Decimal = Decimal("0")

    def to_config(self) -> ChargesConfig:
        # A stored insurance > 0 is treated as the billed amount
        return ChargesConfig(
            loading_fee=self.loading_fee,
            wood_packaging=self.wood_packaging,
            insurance_override=self.insurance if self.insurance > 0 else None,
            transport_advance=self.transport_advance,
            gst_rate_percent=self.gst_rate,
        )

    @classmethod
    def from_charges(cls, charges: ChargesConfig, totals: ChargesResult) -> 'AdditionalChargesDTO':
        return cls(
            loading_fee=charges.loading_fee,
            wood_packaging=charges.wood_packaging,
            insurance=totals.insurance,
            transport_advance=charges.transport_advance,
            gst_rate=charges.gst_rate_percent,
            gst_amount=totals.tax_amount,
        )

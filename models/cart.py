# The cart lives on the backend; this client only holds a view of it.
# CartDTO is what GET /api/getUserCart returns, CartSummaryDTO is that view
# with the charges being edited and the totals recomputed from them.
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.cartItem import CartItemDTO
from models.charges import AdditionalChargesDTO, ChargesConfig, ChargesResult


class CartDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[CartItemDTO] = Field(default_factory=list)
    additional_charges: AdditionalChargesDTO | None = None


class CartSummaryDTO(BaseModel):
    items: list[CartItemDTO]
    charges: ChargesConfig
    totals: ChargesResult

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0

    def find_item(self, product_id: str) -> CartItemDTO | None:
        return next((item for item in self.items if item.post_id == product_id), None)

    @property
    def additional_charges(self) -> AdditionalChargesDTO:
        return AdditionalChargesDTO.from_charges(self.charges, self.totals)

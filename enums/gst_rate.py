from decimal import Decimal
from enum import Enum


class GstRate(int, Enum):
    """
    GST rates offered on the cart page.

    The rate is stored as a plain percentage on ChargesConfig, so any other
    value the backend sends is still accepted; these are only the choices
    the dashboard presents.
    """

    STANDARD = 18
    BLOCK = 12

    @property
    def description(self) -> str:
        return {
            GstRate.STANDARD: "Standard items",
            GstRate.BLOCK: "Block items",
        }[self]

    @property
    def percent(self) -> Decimal:
        return Decimal(self.value)

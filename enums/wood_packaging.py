from decimal import Decimal
from enum import Enum


class WoodPackagingTier(int, Enum):
    """
    Standard wood-packaging tiers (amount in rupees).

    An admin may enter any other non-negative amount; such amounts take part
    in the charges sum the same way but are labelled "Custom packaging".
    """

    BASIC = 1500
    STANDARD = 2500
    PREMIUM = 3500
    DELUXE = 4500

    @property
    def label(self) -> str:
        return self.name.title()

    @property
    def description(self) -> str:
        return {
            WoodPackagingTier.BASIC: "Basic protection",
            WoodPackagingTier.STANDARD: "Standard protection",
            WoodPackagingTier.PREMIUM: "Premium protection",
            WoodPackagingTier.DELUXE: "Maximum protection",
        }[self]

    @property
    def amount(self) -> Decimal:
        return Decimal(self.value)

    @classmethod
    def from_amount(cls, amount: Decimal | int | float) -> 'WoodPackagingTier | None':
        """
        Find the tier with exactly this amount.

        Examples:
            >>> WoodPackagingTier.from_amount(2500)
            <WoodPackagingTier.STANDARD: 2500>
            >>> WoodPackagingTier.from_amount(1800) is None
            True
        """
        for tier in cls:
            if Decimal(tier.value) == Decimal(str(amount)):
                return tier
        return None

    @classmethod
    def packaging_label(cls, amount: Decimal | int | float) -> str:
        """Display label for a packaging amount, e.g. "Premium packaging"."""
        tier = cls.from_amount(amount)
        if tier is None:
            return "Custom packaging"
        return f"{tier.label} packaging"

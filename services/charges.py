from decimal import Decimal, ROUND_CEILING, ROUND_HALF_UP
from typing import Iterable

from models.charges import ChargesConfig, ChargesResult, LineItem

# Insurance is billed per started lakh (100,000) of items value
LAKH = Decimal("100000")
INSURANCE_RATE_PER_LAKH = Decimal("345")

# Tax is rounded to whole rupees
CURRENCY_UNIT = Decimal("1")


class ChargesCalculator:
    """
    Cart pricing and additional-charges calculator.

    Pure Decimal arithmetic shared by the cart editor and the order/invoice
    views, so all of them derive totals from one formula. No I/O, no state:
    safe to call after every edit.
    """

    @staticmethod
    def compute_items_subtotal(items: Iterable[LineItem]) -> Decimal:
        """
        Sum of unit_price × quantity over all items.

        No rounding is applied here; currency precision is left to
        formatting.
        """
        return sum((item.unit_price * item.quantity for item in items), Decimal("0"))

    @staticmethod
    def insured_lakhs(items_subtotal: Decimal) -> int:
        """
        Number of whole lakhs billed for insurance.

        Any started lakh counts as a full one (ceiling, never nearest or
        truncation): 100,000 → 1, 100,001 → 2, 0 → 0.
        """
        return int((Decimal(items_subtotal) / LAKH).to_integral_value(rounding=ROUND_CEILING))

    @staticmethod
    def compute_insurance(items_subtotal: Decimal, config: ChargesConfig) -> Decimal:
        """
        Insurance for an items subtotal.

        A manual override > 0 wins. Otherwise ceil(subtotal / 1 lakh) × ₹345.

        Examples:
            250,000 → ceil(2.5) = 3 → 1035
            override 2000 → 2000
        """
        if config.has_insurance_override:
            return config.insurance_override
        return ChargesCalculator.insured_lakhs(items_subtotal) * INSURANCE_RATE_PER_LAKH

    @staticmethod
    def wood_packaging_amount(config: ChargesConfig) -> Decimal:
        # Tier amounts and custom amounts take part in the sum identically
        return config.wood_packaging

    @staticmethod
    def compute_tax(subtotal_before_tax: Decimal, gst_rate_percent: Decimal) -> Decimal:
        """GST on the pre-tax subtotal, rounded to whole rupees (ties round half up)."""
        tax = subtotal_before_tax * gst_rate_percent / Decimal("100")
        return tax.quantize(CURRENCY_UNIT, rounding=ROUND_HALF_UP)

    @staticmethod
    def compute_totals(items: Iterable[LineItem], config: ChargesConfig) -> ChargesResult:
        """
        Compute all cart totals.

        Algorithm:
        1. items_subtotal = Σ unit_price × quantity
        2. insurance = override or ceil(items_subtotal / 1 lakh) × 345
        3. subtotal_before_tax = items_subtotal + loading fee + wood packaging
           + insurance + transport advance
        4. tax_amount = round(subtotal_before_tax × gst% / 100)
        5. total_amount = subtotal_before_tax + tax_amount

        Example:
            500 × 200 items, loading 1000, Basic packaging 1500,
            transport 15000, GST 18%:
            100000 + 1000 + 1500 + 345 + 15000 = 117845
            tax = round(21212.1) = 21212, total = 139057

        Inputs are assumed validated (negatives are clamped before this is
        called), so there are no error conditions.
        """
        items_subtotal = ChargesCalculator.compute_items_subtotal(items)
        insurance = ChargesCalculator.compute_insurance(items_subtotal, config)
        subtotal_before_tax = (
            items_subtotal
            + config.loading_fee
            + ChargesCalculator.wood_packaging_amount(config)
            + insurance
            + config.transport_advance
        )
        tax_amount = ChargesCalculator.compute_tax(subtotal_before_tax, config.gst_rate_percent)

        return ChargesResult(
            items_subtotal=items_subtotal,
            insurance=insurance,
            subtotal_before_tax=subtotal_before_tax,
            tax_amount=tax_amount,
            total_amount=subtotal_before_tax + tax_amount,
        )

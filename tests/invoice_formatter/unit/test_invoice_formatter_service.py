"""
Unit tests for InvoiceFormatterService.

Tests cover:
- Amount formatting (thousands separators, two decimals)
- Line items with commission and custom specs
- Charges breakdown labels (packaging tier, insurance basis, GST rate)
- Stored vs recomputed order totals
"""

from decimal import Decimal

from models.charges import ChargesConfig
from models.order import OrderDTO
from services.charges import ChargesCalculator
from services.invoice_formatter import InvoiceFormatterService
from services.order import OrderService


class TestFormatAmount:

    def test_thousands_separator(self):
        assert InvoiceFormatterService.format_amount(Decimal("139057")) == "₹139,057.00"

    def test_fractional_amount(self):
        assert InvoiceFormatterService.format_amount(Decimal("1234.5"), "Rs.") == "Rs.1,234.50"


class TestFormatLineItems:

    def test_standard_item(self, granite_item):
        text = InvoiceFormatterService.format_line_item(granite_item)

        assert "200 × Black Galaxy Granite  ₹500.00  = ₹100,000.00" in text
        assert "Standard specs" in text

    def test_commission_and_custom_specs(self, marble_item):
        text = InvoiceFormatterService.format_line_item(marble_item)

        assert "₹5,750.00" in text
        assert InvoiceFormatterService._strike("₹5,000.00") in text
        assert "+15%" in text
        assert "= ₹11,500.00" in text
        assert "Qty: 120 sqft, Finish: Polished, Thickness: 20 mm" in text

    def test_multiple_items(self, granite_item, marble_item):
        text = InvoiceFormatterService.format_line_items([granite_item, marble_item])

        assert text.index("Black Galaxy Granite") < text.index("Statuario Marble")


class TestFormatChargesBreakdown:

    def test_tier_and_auto_insurance(self, granite_item, default_charges):
        totals = ChargesCalculator.compute_totals([granite_item.to_line_item()], default_charges)

        text = InvoiceFormatterService.format_charges_breakdown(default_charges, totals)

        assert "Wood Packaging (Basic packaging)" in text
        assert "Insurance (1 lakh × ₹345)" in text
        assert "GST (18%)" in text
        assert "₹21,212.00" in text
        assert text.splitlines()[-1].endswith("₹139,057.00")

    def test_custom_packaging_and_manual_insurance(self):
        charges = ChargesConfig(wood_packaging=Decimal("1800"), insurance_override=Decimal("2000"),
                                gst_rate_percent=Decimal("12"))
        totals = ChargesCalculator.compute_totals([], charges)

        text = InvoiceFormatterService.format_charges_breakdown(charges, totals)

        assert "Wood Packaging (Custom packaging)" in text
        assert "Insurance (manual)" in text
        assert "GST (12%)" in text

    def test_plural_lakhs(self, default_charges):
        totals = ChargesCalculator.compute_totals([], default_charges).model_copy(
            update={"items_subtotal": Decimal("250000")}
        )

        assert InvoiceFormatterService.format_insurance_basis(default_charges, totals) == "3 lakhs × ₹345"


class TestFormatOrder:

    def test_order_with_charges(self):
        order = OrderDTO.model_validate({
            "orderId": "ORD-1001",
            "items": [{"postId": "prod-granite", "name": "Black Galaxy Granite", "price": 500, "quantity": 200}],
            "totalAmount": 139057,
            "additionalCharges": {"loadingFee": 1000, "woodPackaging": 1500, "insurance": 345,
                                  "transportAdvance": 15000, "gstRate": 18, "gstAmount": 21212},
        })
        order_totals = OrderService.compute_totals(order)

        text = InvoiceFormatterService.format_order(order, order_totals)

        assert text.startswith("Order #ORD-1001")
        assert "Insurance (manual)" in text
        assert "GST (as billed)" in text
        assert "Total (as billed)" in text

    def test_order_without_charges(self):
        order = OrderDTO.model_validate({
            "orderId": "ORD-1002",
            "items": [{"postId": "prod-granite", "name": "Black Galaxy Granite", "price": 500, "quantity": 2}],
            "totalAmount": 1000,
        })
        order_totals = OrderService.compute_totals(order)

        text = InvoiceFormatterService.format_order(order, order_totals)

        assert "Wood Packaging" not in text
        assert text.splitlines()[-1].endswith("₹1,000.00")

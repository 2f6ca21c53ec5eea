"""
Invoice Formatter Service

Plain-text rendering of carts and orders for the dashboards:
- Line items with commission-adjusted prices and custom specs
- Additional charges breakdown (packaging, insurance, GST)
- Stored vs recomputed order totals
"""

from decimal import Decimal

import config
from enums.dashboard import Dashboard
from enums.wood_packaging import WoodPackagingTier
from models.cartItem import CartItemDTO
from models.charges import ChargesConfig, ChargesResult
from models.order import OrderDTO, OrderTotalsDTO
from services.charges import ChargesCalculator, INSURANCE_RATE_PER_LAKH
from utils.localizator import Localizator

LABEL_WIDTH = 36


class InvoiceFormatterService:
    """Centralized invoice formatting service"""

    @staticmethod
    def format_amount(amount: Decimal, currency_symbol: str | None = None) -> str:
        """
        Two decimals with thousands separators.

        Example:
            139057 → "₹139,057.00"
        """
        currency_symbol = config.CURRENCY_SYMBOL if currency_symbol is None else currency_symbol
        return f"{currency_symbol}{Decimal(amount):,.2f}"

    @staticmethod
    def _strike(text: str) -> str:
        # U+0336 combining long stroke overlay
        return "".join(f"{char}̶" for char in text)

    @staticmethod
    def _line(label: str, value: str) -> str:
        return f"{label:<{LABEL_WIDTH}}{value:>16}"

    @staticmethod
    def format_line_item(item: CartItemDTO, currency_symbol: str | None = None) -> str:
        """
        Format one cart/order line.

        Example output:
            2 × Black Galaxy Granite  ₹5,750.00  ₹̶5̶,̶0̶0̶0̶.̶0̶0̶  +15%  = ₹11,500.00
               Qty: 120 sqft, Finish: Polished, Thickness: 20 mm
        """
        fmt = InvoiceFormatterService.format_amount
        price = fmt(item.display_price, currency_symbol)
        line = f"{item.quantity} × {item.name}  {price}"

        if item.has_commission:
            line += f"  {InvoiceFormatterService._strike(fmt(item.original_price, currency_symbol))}"
            if item.commission_info is not None and item.commission_info.total_commission:
                commission = Localizator.get_text(Dashboard.COMMON, "order_commission").format(
                    value=f"{item.commission_info.total_commission:g}"
                )
                line += f"  {commission}"

        line += f"  = {fmt(item.line_total, currency_symbol)}"

        if item.has_custom_specs:
            specs = []
            if item.custom_quantity:
                specs.append(Localizator.get_text(Dashboard.COMMON, "order_custom_quantity").format(value=item.custom_quantity))
            if item.custom_finish:
                specs.append(Localizator.get_text(Dashboard.COMMON, "order_custom_finish").format(value=item.custom_finish))
            if item.custom_thickness:
                specs.append(Localizator.get_text(Dashboard.COMMON, "order_custom_thickness").format(value=item.custom_thickness))
            line += "\n   " + ", ".join(specs)
        else:
            line += "\n   " + Localizator.get_text(Dashboard.COMMON, "order_standard_specs")

        return line

    @staticmethod
    def format_line_items(items: list[CartItemDTO], currency_symbol: str | None = None) -> str:
        return "\n".join(InvoiceFormatterService.format_line_item(item, currency_symbol) for item in items)

    @staticmethod
    def format_insurance_basis(charges: ChargesConfig, totals: ChargesResult,
                               currency_symbol: str | None = None) -> str:
        """How insurance was derived: "3 lakhs × ₹345" or "manual"."""
        if charges.has_insurance_override:
            return Localizator.get_text(Dashboard.COMMON, "charges_insurance_manual")
        currency_symbol = config.CURRENCY_SYMBOL if currency_symbol is None else currency_symbol
        lakhs = ChargesCalculator.insured_lakhs(totals.items_subtotal)
        return Localizator.get_text(Dashboard.COMMON, "charges_insurance_auto").format(
            lakhs=lakhs,
            plural="" if lakhs == 1 else "s",
            currency=currency_symbol,
            rate=INSURANCE_RATE_PER_LAKH,
        )

    @staticmethod
    def format_charges_breakdown(charges: ChargesConfig, totals: ChargesResult,
                                 currency_symbol: str | None = None) -> str:
        """
        Format the additional charges and totals block.

        Example output:
            Items Subtotal                    ₹100,000.00
            Loading Fee                         ₹1,000.00
            Wood Packaging (Basic packaging)    ₹1,500.00
            Insurance (1 lakh × ₹345)             ₹345.00
            Transport Advance                  ₹15,000.00
            Subtotal before GST               ₹117,845.00
            GST (18%)                          ₹21,212.00
            Total                             ₹139,057.00
        """
        fmt = lambda amount: InvoiceFormatterService.format_amount(amount, currency_symbol)
        line = InvoiceFormatterService._line

        def text(key: str) -> str:
            return Localizator.get_text(Dashboard.COMMON, key)

        packaging = WoodPackagingTier.packaging_label(charges.wood_packaging)
        insurance_basis = InvoiceFormatterService.format_insurance_basis(charges, totals, currency_symbol)

        lines = [
            line(text("charges_items_subtotal"), fmt(totals.items_subtotal)),
            line(text("charges_loading_fee"), fmt(charges.loading_fee)),
            line(f"{text('charges_wood_packaging')} ({packaging})", fmt(charges.wood_packaging)),
            line(f"{text('charges_insurance')} ({insurance_basis})", fmt(totals.insurance)),
            line(text("charges_transport_advance"), fmt(charges.transport_advance)),
            line(text("charges_subtotal_before_tax"), fmt(totals.subtotal_before_tax)),
            line(text("charges_gst").format(rate=f"{charges.gst_rate_percent:g}"), fmt(totals.tax_amount)),
            "─" * (LABEL_WIDTH + 16),
            line(text("charges_total"), fmt(totals.total_amount)),
        ]
        return "\n".join(lines)

    @staticmethod
    def format_order_totals(order_totals: OrderTotalsDTO, currency_symbol: str | None = None) -> str:
        """
        Stored total of an order, followed by the recomputed breakdown when the
        order carries its charges.
        """
        fmt = lambda amount: InvoiceFormatterService.format_amount(amount, currency_symbol)
        line = InvoiceFormatterService._line

        lines = [line(Localizator.get_text(Dashboard.COMMON, "charges_items_subtotal"), fmt(order_totals.items_subtotal))]
        if order_totals.stored_tax is not None:
            lines.append(line(Localizator.get_text(Dashboard.COMMON, "charges_stored_gst"),
                              fmt(order_totals.stored_tax)))
        lines.append(line(Localizator.get_text(Dashboard.COMMON, "charges_stored_total"), fmt(order_totals.stored_total)))
        if order_totals.recomputed is not None:
            lines.append(line(Localizator.get_text(Dashboard.COMMON, "charges_total"),
                              fmt(order_totals.recomputed.total_amount)))
        return "\n".join(lines)

    @staticmethod
    def format_order(order: OrderDTO, order_totals: OrderTotalsDTO, currency_symbol: str | None = None) -> str:
        """Complete order text: header, line items, charges and totals."""
        header = Localizator.get_text(Dashboard.COMMON, "order_header").format(order_id=order.order_id)
        sections = [header, InvoiceFormatterService.format_line_items(order.items, currency_symbol)]

        if order.additional_charges is not None and order_totals.recomputed is not None:
            sections.append(InvoiceFormatterService.format_charges_breakdown(
                order.additional_charges.to_config(), order_totals.recomputed, currency_symbol
            ))
        sections.append(InvoiceFormatterService.format_order_totals(order_totals, currency_symbol))
        return "\n\n".join(sections)

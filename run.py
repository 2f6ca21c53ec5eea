import argparse
import asyncio
import logging
import os
import sys

from api import StorefrontApiClient, resolve_token
from enums.dashboard import Dashboard
from exceptions import StorefrontException
from services.cart import CartService
from services.invoice_formatter import InvoiceFormatterService
from services.order import OrderService
from utils.error_handler import handle_service_error, handle_unexpected_error
from utils.localizator import Localizator
from utils.logging_config import setup_logging


async def show_cart(token: str | None) -> int:
    async with StorefrontApiClient(token) as client:
        summary = await CartService.load_cart(client)
    if summary.is_empty:
        print(Localizator.get_text(Dashboard.CLIENT, "error_empty_cart"))
        return 0
    print(InvoiceFormatterService.format_line_items(summary.items))
    print()
    print(InvoiceFormatterService.format_charges_breakdown(summary.charges, summary.totals))
    return 0


async def show_order(token: str | None, order_id: str, client_id: str) -> int:
    async with StorefrontApiClient(token) as client:
        order = await OrderService.get_order(client, order_id, client_id)
    order_totals = OrderService.compute_totals(order)
    print(InvoiceFormatterService.format_order(order, order_totals))
    if order_totals.drift:
        print(f"\nDrift: {InvoiceFormatterService.format_amount(order_totals.drift)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Storefront dashboard client")
    parser.add_argument("--token", default=os.environ.get("STOREFRONT_TOKEN"),
                        help="Client bearer token (default: $STOREFRONT_TOKEN)")
    parser.add_argument("--impersonation-token", default=os.environ.get("STOREFRONT_IMPERSONATION_TOKEN"),
                        help="Agent/admin impersonation token, wins over --token")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("cart", help="Show the current cart with its charges breakdown")

    order_parser = subparsers.add_parser("order", help="Show an order with stored and recomputed totals")
    order_parser.add_argument("order_id")
    order_parser.add_argument("--client-id", required=True,
                              help="Client whose order list is searched when the order endpoint fails")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    token = resolve_token(args.impersonation_token, args.token)

    try:
        if args.command == "cart":
            return asyncio.run(show_cart(token))
        return asyncio.run(show_order(token, args.order_id, args.client_id))
    except StorefrontException as e:
        print(handle_service_error(e, Dashboard.CLIENT), file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logging.info("Interrupted")
        return 130
    except Exception as e:
        print(handle_unexpected_error(e, Dashboard.CLIENT), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Error Handler Utility for dashboard actions

Provides centralized error handling for page actions with:
- Localized error messages
- Consistent user experience
- Automatic exception to message mapping
- Logging for debugging

Usage in a page action:
    from utils.error_handler import handle_service_error

    try:
        summary = await CartService.load_cart(client)
    except StorefrontException as e:
        notify(handle_service_error(e, Dashboard.CLIENT))
"""

import functools
import logging
from typing import Any, Callable

from enums.dashboard import Dashboard
from exceptions import (
    StorefrontException,
    AuthenticationRequiredException,
    AuthenticationFailedException,
    ApiRequestException,
    ApiConnectionException,
    ApiResponseException,
    EmptyCartException,
    CartItemNotFoundException,
    InvalidQuantityException,
    OrderNotFoundException,
    OrderPlacementException,
    InvalidFollowUpException,
    AgentPartialUpdateException,
)
from utils.localizator import Localizator


def handle_service_error(exception: StorefrontException, entity: Dashboard = Dashboard.CLIENT) -> str:
    """
    Convert service exception to localized user-friendly error message.

    Args:
        exception: The custom exception raised by a service
        entity: Dashboard the message is shown on

    Returns:
        Localized error message string
    """
    logging.warning(f"Service error handled: {type(exception).__name__} - {str(exception)}")

    error_mapping = {
        # API exceptions
        AuthenticationRequiredException: "error_authentication_required",
        AuthenticationFailedException: "error_authentication_failed",
        ApiRequestException: "error_api_request",
        ApiConnectionException: "error_api_connection",
        ApiResponseException: "error_api_response",

        # Cart exceptions
        EmptyCartException: "error_empty_cart",
        CartItemNotFoundException: "error_cart_item_not_found",
        InvalidQuantityException: "error_invalid_quantity",

        # Order exceptions
        OrderNotFoundException: "error_order_not_found",
        OrderPlacementException: "error_order_placement",

        # Follow-up exceptions
        InvalidFollowUpException: "error_follow_up_invalid",

        # Agent exceptions
        AgentPartialUpdateException: "error_agent_partial_update",
    }

    localization_key = error_mapping.get(type(exception))

    if not localization_key:
        # Unknown exception type - use generic error message
        logging.error(f"Unmapped exception type: {type(exception).__name__}")
        return Localizator.get_text(entity, "error_unexpected")

    # Exception details become format arguments (order_id, status, reason, ...)
    exception_data = dict(exception.details)
    if 'completed_steps' in exception_data:
        exception_data['completed_steps'] = ', '.join(exception_data['completed_steps']) or 'none'
    if exception_data.get('reason') is None and 'reason' in exception_data:
        exception_data['reason'] = ''

    try:
        return Localizator.get_text(entity, localization_key).format(**exception_data)
    except KeyError as e:
        # Missing formatting parameter - log and return without formatting
        logging.error(f"Missing format parameter in error message: {e}")
        return Localizator.get_text(entity, localization_key)


def handle_unexpected_error(exception: Exception, entity: Dashboard = Dashboard.CLIENT) -> str:
    """
    Handle unexpected exceptions (non-StorefrontException).

    Also logs the full exception for debugging.
    """
    logging.error(f"Unexpected error: {type(exception).__name__} - {str(exception)}", exc_info=True)
    return Localizator.get_text(entity, "error_unexpected")


def safe_service_call(notify: Callable[[str], Any], entity: Dashboard = Dashboard.CLIENT):
    """
    Decorator for page actions to catch errors and surface them as a notification.

    Failures stay scoped to the action: the wrapped coroutine returns None
    and the user sees the message passed to notify.

    Usage:
        @safe_service_call(toast, Dashboard.CLIENT)
        async def remove(product_id):
            return await CartService.remove_item(client, summary, product_id)
    """
    def decorator(action):
        @functools.wraps(action)
        async def wrapper(*args, **kwargs):
            try:
                return await action(*args, **kwargs)
            except StorefrontException as e:
                notify(handle_service_error(e, entity))
            except Exception as e:
                notify(handle_unexpected_error(e, entity))
            return None

        return wrapper
    return decorator

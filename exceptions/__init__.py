"""
Custom exceptions for the storefront dashboard client.

Exception Hierarchy:
--------------------
StorefrontException (base)
├── ApiException
│   ├── AuthenticationRequiredException
│   ├── AuthenticationFailedException
│   ├── ApiRequestException
│   ├── ApiConnectionException
│   └── ApiResponseException
├── CartException
│   ├── EmptyCartException
│   ├── CartItemNotFoundException
│   └── InvalidQuantityException
├── OrderException
│   ├── OrderNotFoundException
│   └── OrderPlacementException
├── FollowUpException
│   └── InvalidFollowUpException
└── AgentException
    └── AgentPartialUpdateException

Usage:
------
Services raise specific exceptions:
    raise OrderNotFoundException(order_id="ORD-1001")

Page actions catch and display user-friendly messages:
    try:
        order = await OrderService.get_order(client, order_id, client_id)
    except StorefrontException as e:
        notify(handle_service_error(e, Dashboard.CLIENT))
"""

from .base import StorefrontException
from .api import (
    ApiException,
    AuthenticationRequiredException,
    AuthenticationFailedException,
    ApiRequestException,
    ApiConnectionException,
    ApiResponseException,
)
from .cart import CartException, EmptyCartException, CartItemNotFoundException, InvalidQuantityException
from .order import OrderException, OrderNotFoundException, OrderPlacementException
from .follow_up import FollowUpException, InvalidFollowUpException
from .agent import AgentException, AgentPartialUpdateException

__all__ = [
    # Base
    'StorefrontException',

    # API
    'ApiException',
    'AuthenticationRequiredException',
    'AuthenticationFailedException',
    'ApiRequestException',
    'ApiConnectionException',
    'ApiResponseException',

    # Cart
    'CartException',
    'EmptyCartException',
    'CartItemNotFoundException',
    'InvalidQuantityException',

    # Order
    'OrderException',
    'OrderNotFoundException',
    'OrderPlacementException',

    # Follow-up
    'FollowUpException',
    'InvalidFollowUpException',

    # Agent
    'AgentException',
    'AgentPartialUpdateException',
]

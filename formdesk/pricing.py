"""Order price calculation."""

from __future__ import annotations

from formdesk.data import crust_price, side_price, size_price, topping_price
from formdesk.models import OrderInput


def unit_price(order: OrderInput) -> int:
    """Price of a single pizza with its toppings and sides."""
    return (
        size_price(order.size)
        + crust_price(order.crust)
        + sum(topping_price(topping) for topping in order.toppings)
        + sum(side_price(side) for side in order.sides)
    )


def calculate_order_price(order: OrderInput) -> int:
    """Total for the order: unit price times quantity.

    A missing quantity counts as one pizza. Non-positive quantities are left to
    the validator; the total never drops below zero.
    """
    quantity = 1 if order.quantity is None else order.quantity
    return max(0, int(unit_price(order) * quantity))

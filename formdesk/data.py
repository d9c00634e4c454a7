"""Static option data and price lookups."""

from __future__ import annotations

from formdesk.config import CURRENCY_SYMBOL
from formdesk.constant import CRUST_PRICES, SIDE_PRICES, SIZE_PRICES, TOPPING_PRICES

SIZE_OPTIONS: list[str] = list(SIZE_PRICES)
CRUST_OPTIONS: list[str] = list(CRUST_PRICES)
TOPPING_OPTIONS: list[str] = list(TOPPING_PRICES)
SIDE_OPTIONS: list[str] = list(SIDE_PRICES)


def size_price(size: str) -> int:
    """Get the base price for a size; unknown sizes cost nothing."""
    return SIZE_PRICES.get(size, 0)


def crust_price(crust: str) -> int:
    """Get the surcharge for a crust; unknown crusts cost nothing."""
    return CRUST_PRICES.get(crust, 0)


def topping_price(topping: str) -> int:
    return TOPPING_PRICES.get(topping, 0)


def side_price(side: str) -> int:
    return SIDE_PRICES.get(side, 0)


def format_price(amount: int) -> str:
    return f"{CURRENCY_SYMBOL}{amount}"


def size_option_label(size: str) -> str:
    """Label shown in the size picker, e.g. ``Small (₹199)``."""
    return f"{size} ({format_price(size_price(size))})"


def crust_option_label(crust: str) -> str:
    """Label shown in the crust picker; free crusts have no surcharge suffix."""
    surcharge = crust_price(crust)
    if not surcharge:
        return crust
    return f"{crust} (+{format_price(surcharge)})"


def addon_option_label(name: str, price: int) -> str:
    """Label for a topping or side chip, e.g. ``Olive (+₹40)``."""
    return f"{name} (+{format_price(price)})"

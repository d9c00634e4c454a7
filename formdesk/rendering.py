"""Rendering helpers that turn controller state into rich Text."""

from __future__ import annotations

from typing import Callable, Iterable

from rich.text import Text

from formdesk.data import format_price
from formdesk.models import OrderInput, Receipt

_EMPTY = "—"
ERROR_STYLE = "bold #ffb3b3"
SUCCESS_STYLE = "bold #0b1f0f on #5fbf72"


def format_field_error(message: str | None) -> Text:
    """Render one field's error line; empty when there is nothing to show."""
    if not message:
        return Text()
    return Text(message, style=ERROR_STYLE)


def format_total(total: int) -> Text:
    text = Text()
    text.append("Total: ", style="bold")
    text.append(format_price(total))
    return text


def format_choice_tags(names: Iterable[str], price_for: Callable[[str], int]) -> Text:
    """Render selected toppings or sides as compact tags in selection order."""
    text = Text()
    for idx, name in enumerate(names):
        if idx > 0:
            text.append(" ")
        text.append(f"[{name} +{format_price(price_for(name))}]", style="white")
    if not text.plain:
        text.append(_EMPTY, style="dim")
    return text


def _preview_line(text: Text, label: str, value: str) -> None:
    if text.plain:
        text.append("\n")
    text.append(f"{label}: ", style="bold")
    text.append(value or _EMPTY)


def format_order_preview(order: OrderInput, total: int) -> Text:
    """Render the live order preview shown under the order form."""
    text = Text()
    _preview_line(text, "Size", order.size)
    _preview_line(text, "Crust", order.crust)
    _preview_line(text, "Toppings", ", ".join(order.toppings))
    _preview_line(text, "Sides", ", ".join(order.sides))
    _preview_line(text, "Quantity", str(order.quantity))
    _preview_line(text, "Notes", order.notes)
    _preview_line(text, "Current total", format_price(total))
    return text


def format_receipt(receipt: Receipt | None) -> Text:
    if receipt is None:
        return Text()
    text = Text()
    text.append(" Order confirmed ", style=SUCCESS_STYLE)
    _preview_line(text, "Receipt ID", receipt.id)
    _preview_line(text, "Time", receipt.timestamp)
    _preview_line(text, "Total", format_price(receipt.total))
    return text


def format_banner(message: str | None, *, failed: bool = False) -> Text:
    """Render a confirmation or retryable failure banner."""
    if not message:
        return Text()
    if failed:
        return Text(f"{message} Try again.", style=ERROR_STYLE)
    return Text(f" {message} ", style=SUCCESS_STYLE)

"""Rich text builders used by the app."""

from formdesk.data import side_price, topping_price
from formdesk.models import OrderInput, Receipt
from formdesk.rendering import (
    format_banner,
    format_choice_tags,
    format_field_error,
    format_order_preview,
    format_receipt,
    format_total,
)

from fakes import FIXED_TIMESTAMP, VALID_ORDER


class TestOrderText:
    def test_preview_lists_every_field(self):
        assert format_order_preview(VALID_ORDER, 918).plain == (
            "Size: Large\n"
            "Crust: Thin\n"
            "Toppings: Mushroom\n"
            "Sides: —\n"
            "Quantity: 2\n"
            "Notes: —\n"
            "Current total: ₹918"
        )

    def test_empty_preview_uses_dashes(self):
        plain = format_order_preview(OrderInput(), 0).plain
        assert "Size: —" in plain
        assert "Current total: ₹0" in plain

    def test_total(self):
        assert format_total(918).plain == "Total: ₹918"

    def test_choice_tags_in_selection_order(self):
        assert format_choice_tags(("Olive", "Corn"), topping_price).plain == "[Olive +₹40] [Corn +₹25]"
        assert format_choice_tags((), side_price).plain == "—"


class TestReceiptText:
    def test_receipt_block(self):
        receipt = Receipt(id="ORD-123456", timestamp=FIXED_TIMESTAMP, order=VALID_ORDER, total=918)
        plain = format_receipt(receipt).plain
        assert "Order confirmed" in plain
        assert "Receipt ID: ORD-123456" in plain
        assert f"Time: {FIXED_TIMESTAMP}" in plain
        assert "Total: ₹918" in plain

    def test_no_receipt_renders_nothing(self):
        assert format_receipt(None).plain == ""


class TestMessages:
    def test_field_error(self):
        assert format_field_error("Choose a size.").plain == "Choose a size."
        assert format_field_error(None).plain == ""

    def test_banners(self):
        assert format_banner("Registration successful. Welcome, Ana!").plain.strip() == (
            "Registration successful. Welcome, Ana!"
        )
        assert format_banner("Server busy.", failed=True).plain == "Server busy. Try again."
        assert format_banner(None).plain == ""

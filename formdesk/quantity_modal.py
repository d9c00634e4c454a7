"""Quantity entry modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from formdesk.rules import coerce_quantity

_MAX_DIGITS = 3


class QuantityModal(ModalScreen[int | None]):
    """Prompt for the number of pizzas; dismisses with the parsed quantity."""

    CSS = """
    QuantityModal {
        align: center middle;
        background: $background 60%;
    }

    #quantity-dialog {
        width: 48;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #quantity-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #quantity-value {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #quantity-help {
        color: #dddddd;
    }
    """

    def __init__(self, current: int) -> None:
        super().__init__()
        self.value = str(current) if current > 0 else ""

    def compose(self) -> ComposeResult:
        with Container(id="quantity-dialog"):
            yield Static("Quantity", id="quantity-title")
            yield Static(id="quantity-value")
            yield Static("Digits only. Enter confirm. Backspace delete. Esc/q/Ctrl+C cancel.", id="quantity-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "q", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self.dismiss(coerce_quantity(self.value))
            event.stop()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character and event.character.isdecimal():
            if len(self.value) < _MAX_DIGITS:
                self.value += event.character
            self._refresh_content()
            event.stop()

    def _refresh_content(self) -> None:
        self.query_one("#quantity-value", Static).update(self.value or "")

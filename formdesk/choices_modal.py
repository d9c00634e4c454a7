"""Checklist modal for toggling toppings or sides."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from formdesk.data import addon_option_label


class ChoicesModal(ModalScreen[None]):
    """Centered modal listing add-on options; Enter toggles the one under the cursor."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("ctrl+c", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "toggle_current", "Toggle"),
        ("space", "toggle_current", "Toggle"),
    ]

    CSS = """
    ChoicesModal {
        align: center middle;
        background: $background 60%;
    }

    #choices-dialog {
        width: 48;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #choices-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #choices-body {
        margin-bottom: 1;
        color: white;
    }

    #choices-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(
        self,
        title: str,
        options: list[str],
        price_for: Callable[[str], int],
        selected: Callable[[], tuple[str, ...]],
        on_toggle: Callable[[str], None],
    ) -> None:
        super().__init__()
        self.title_text = title
        self.options = options
        self.price_for = price_for
        self.selected = selected
        self.on_toggle = on_toggle

    def compose(self) -> ComposeResult:
        with Container(id="choices-dialog"):
            yield Static(self.title_text, id="choices-title")
            yield Static(id="choices-body")
            yield Static("J/K/↑/↓ move, Enter/Space toggle, Esc/q/Ctrl+C close", id="choices-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_close(self) -> None:
        self.dismiss()

    def action_move_cursor(self, delta: int) -> None:
        if not self.options:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.options)
        self._refresh_content()

    def action_toggle_current(self) -> None:
        if not self.options:
            return
        self.on_toggle(self.options[self.cursor_index])
        self._refresh_content()

    def _refresh_content(self) -> None:
        body = self.query_one("#choices-body", Static)
        chosen = set(self.selected())

        content = Text(style="white")
        for idx, name in enumerate(self.options):
            if idx > 0:
                content.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            is_checked = name in chosen
            checked = "[x]" if is_checked else "[ ]"
            style = "bold white" if is_checked else "white"
            content.append(f"{pointer}{checked} {addon_option_label(name, self.price_for(name))}", style=style)
        body.update(content)

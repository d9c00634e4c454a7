"""Main Textual app class."""

from __future__ import annotations

import logging
from typing import Any

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Button, Checkbox, Header, Input, Select, Static

from formdesk.choices_modal import ChoicesModal
from formdesk.config import DB_PATH
from formdesk.constant import GENDER_OPTIONS
from formdesk.controller import FormController, OrderController, RegistrationController, SubmitStatus
from formdesk.data import (
    CRUST_OPTIONS,
    SIDE_OPTIONS,
    SIZE_OPTIONS,
    TOPPING_OPTIONS,
    crust_option_label,
    side_price,
    size_option_label,
    topping_price,
)
from formdesk.persistence import KeyValueStore, SqliteKeyValueStore
from formdesk.quantity_modal import QuantityModal
from formdesk.rendering import (
    format_banner,
    format_choice_tags,
    format_field_error,
    format_order_preview,
    format_receipt,
    format_total,
)
from formdesk.submission import DelayedSubmitter, Submitter

logger = logging.getLogger(__name__)

# (field, placeholder, masked)
_REGISTRATION_TEXT_FIELDS: list[tuple[str, str, bool]] = [
    ("name", "Your full name", False),
    ("email", "you@example.com", False),
    ("phone", "10–15 digit number", False),
    ("password", "Strong password", True),
    ("confirm_password", "Retype password", True),
]

_REG_PREFIX = "reg-"
_ORDER_PREFIX = "order-"


def _field_for(widget_id: str | None, prefix: str) -> str | None:
    if not widget_id or not widget_id.startswith(prefix):
        return None
    return widget_id[len(prefix) :]


def _select_value(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _select_initial(value: str, options: list[str]) -> Any:
    return value if value in options else Select.NULL


class FormsApp(App):
    """A Textual app showing the registration and pizza order forms side by side."""

    TITLE = "Forms & Interactivity"
    SUB_TITLE = "Registration / Pizza Order"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #registration-pane {
        width: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    #order-pane {
        width: 1fr;
        border: round $secondary;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }

    .field-error {
        height: auto;
        margin-bottom: 1;
    }

    .actions {
        height: auto;
        margin-top: 1;
    }

    .actions Button {
        margin-right: 1;
    }

    .summary {
        margin-top: 1;
        padding: 0 1;
        border: tall $surface;
    }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, store: KeyValueStore | None = None, submitter: Submitter | None = None) -> None:
        super().__init__()
        if store is None:
            sqlite_store = SqliteKeyValueStore(DB_PATH)
            sqlite_store.bootstrap_schema()
            store = sqlite_store
        submitter = submitter or DelayedSubmitter()
        self.registration = RegistrationController(store, submitter, on_change=self._refresh_registration)
        self.order = OrderController(store, submitter, on_change=self._refresh_order)
        logger.debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with VerticalScroll(id="registration-pane"):
                yield from self._compose_registration()
            with VerticalScroll(id="order-pane"):
                yield from self._compose_order()

    def _compose_registration(self) -> ComposeResult:
        values = self.registration.values
        yield Static("User Registration", classes="pane-title")
        for field_name, placeholder, masked in _REGISTRATION_TEXT_FIELDS:
            yield Input(
                value=getattr(values, field_name),
                placeholder=placeholder,
                password=masked,
                id=f"{_REG_PREFIX}{field_name}",
            )
            yield Static(id=f"{_REG_PREFIX}{field_name}-error", classes="field-error")
        yield Select(
            [(gender, gender) for gender in GENDER_OPTIONS],
            prompt="Gender",
            value=_select_initial(values.gender, GENDER_OPTIONS),
            id=f"{_REG_PREFIX}gender",
        )
        yield Static(id=f"{_REG_PREFIX}gender-error", classes="field-error")
        yield Checkbox("I accept the Terms & Conditions", value=values.terms, id=f"{_REG_PREFIX}terms")
        yield Static(id=f"{_REG_PREFIX}terms-error", classes="field-error")
        with Horizontal(classes="actions"):
            yield Button("Reset", id="reg-reset")
            yield Button("Register", id="reg-submit", variant="primary")
        yield Static(id="reg-banner")

    def _compose_order(self) -> ComposeResult:
        values = self.order.values
        yield Static("Mario's Pizza Order", classes="pane-title")
        yield Select(
            [(size_option_label(size), size) for size in SIZE_OPTIONS],
            prompt="Size",
            value=_select_initial(values.size, SIZE_OPTIONS),
            id=f"{_ORDER_PREFIX}size",
        )
        yield Static(id=f"{_ORDER_PREFIX}size-error", classes="field-error")
        yield Select(
            [(crust_option_label(crust), crust) for crust in CRUST_OPTIONS],
            prompt="Crust",
            value=_select_initial(values.crust, CRUST_OPTIONS),
            id=f"{_ORDER_PREFIX}crust",
        )
        yield Static(id=f"{_ORDER_PREFIX}crust-error", classes="field-error")
        with Horizontal(classes="actions", id="order-toppings-row"):
            yield Button("Toppings…", id="order-toppings-edit")
            yield Static(id="order-toppings")
        yield Static(id=f"{_ORDER_PREFIX}toppings-error", classes="field-error")
        with Horizontal(classes="actions"):
            yield Button("Sides…", id="order-sides-edit")
            yield Static(id="order-sides")
        with Horizontal(classes="actions"):
            yield Button("Quantity…", id="order-quantity-edit")
            yield Static(id="order-quantity")
        yield Static(id=f"{_ORDER_PREFIX}quantity-error", classes="field-error")
        yield Input(value=values.notes, placeholder="Extra cheese, less spicy...", id=f"{_ORDER_PREFIX}notes")
        yield Static(id="order-total", classes="summary")
        with Horizontal(classes="actions"):
            yield Button("Reset", id="order-reset")
            yield Button("Place order", id="order-submit", variant="primary")
        yield Static("Order preview", classes="pane-title")
        yield Static(id="order-preview")
        yield Static(id="order-receipt")
        yield Static(id="order-banner")

    def on_mount(self) -> None:
        self._refresh_registration()
        self._refresh_order()

    # Input events

    def on_input_changed(self, event: Input.Changed) -> None:
        reg_field = _field_for(event.input.id, _REG_PREFIX)
        if reg_field is not None:
            self.registration.update(**{reg_field: event.value})
            self._refresh_registration()
            return
        if _field_for(event.input.id, _ORDER_PREFIX) == "notes":
            self.order.set_notes(event.value)
            self._refresh_order()

    def on_descendant_blur(self, event: events.DescendantBlur) -> None:
        # Leaving a form control marks its field as visited.
        widget = event.widget
        if not isinstance(widget, (Input, Select, Checkbox)):
            return
        reg_field = _field_for(widget.id, _REG_PREFIX)
        if reg_field in self.registration.field_names:
            self.registration.touch(reg_field)
            self._refresh_registration()
            return
        order_field = _field_for(widget.id, _ORDER_PREFIX)
        if order_field in self.order.field_names:
            self.order.touch(order_field)
            self._refresh_order()

    def on_select_changed(self, event: Select.Changed) -> None:
        value = _select_value(event.value)
        reg_field = _field_for(event.select.id, _REG_PREFIX)
        if reg_field is not None:
            if value != getattr(self.registration.values, reg_field):
                self.registration.update(**{reg_field: value})
                self.registration.touch(reg_field)
            self._refresh_registration()
            return

        order_field = _field_for(event.select.id, _ORDER_PREFIX)
        if order_field is None or value == getattr(self.order.values, order_field):
            return
        if order_field == "size":
            self.order.select_size(value)
        else:
            self.order.select_crust(value)
        self.order.touch(order_field)
        self._refresh_order()

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        if event.checkbox.id != f"{_REG_PREFIX}terms":
            return
        if event.value != self.registration.values.terms:
            self.registration.update(terms=event.value)
            self.registration.touch("terms")
        self._refresh_registration()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        logger.debug("button_pressed id=%s", button_id)
        if button_id == "reg-reset":
            self.registration.reset()
        elif button_id == "reg-submit":
            self.run_worker(self._submit(self.registration), group="registration-submit")
        elif button_id == "order-reset":
            self.order.reset()
        elif button_id == "order-submit":
            self.run_worker(self._submit(self.order), group="order-submit")
        elif button_id == "order-toppings-edit":
            self._open_choices("toppings")
        elif button_id == "order-sides-edit":
            self._open_choices("sides")
        elif button_id == "order-quantity-edit":
            self.push_screen(QuantityModal(self.order.values.quantity), callback=self._on_quantity_chosen)

    async def _submit(self, controller: FormController[Any]) -> None:
        status = await controller.submit()
        logger.debug("submit_finished form=%s status=%s", controller.storage_key, status.value)
        if status is SubmitStatus.BUSY:
            self.notify("Already submitting, please wait.", severity="warning")

    def _open_choices(self, field_name: str) -> None:
        if field_name == "toppings":
            modal = ChoicesModal(
                "Toppings",
                TOPPING_OPTIONS,
                topping_price,
                selected=lambda: self.order.values.toppings,
                on_toggle=self.order.toggle_topping,
            )
        else:
            modal = ChoicesModal(
                "Sides",
                SIDE_OPTIONS,
                side_price,
                selected=lambda: self.order.values.sides,
                on_toggle=self.order.toggle_side,
            )

        def _closed(_: None) -> None:
            self.order.touch(field_name)
            self._refresh_order()

        self.push_screen(modal, callback=_closed)

    def _on_quantity_chosen(self, quantity: int | None) -> None:
        if quantity is None:
            return
        self.order.set_quantity(quantity)
        self.order.touch("quantity")
        self._refresh_order()

    # Rendering

    def _refresh_registration(self) -> None:
        controller = self.registration
        values = controller.values
        visible = controller.visible_errors
        try:
            for field_name, _, _ in _REGISTRATION_TEXT_FIELDS:
                widget = self.query_one(f"#{_REG_PREFIX}{field_name}", Input)
                if widget.value != getattr(values, field_name):
                    widget.value = getattr(values, field_name)
            gender = self.query_one(f"#{_REG_PREFIX}gender", Select)
            if _select_value(gender.value) != values.gender:
                gender.value = _select_initial(values.gender, GENDER_OPTIONS)
            terms = self.query_one(f"#{_REG_PREFIX}terms", Checkbox)
            if terms.value != values.terms:
                terms.value = values.terms
            for field_name in controller.field_names:
                self.query_one(f"#{_REG_PREFIX}{field_name}-error", Static).update(
                    format_field_error(visible.get(field_name))
                )
            submit = self.query_one("#reg-submit", Button)
        except NoMatches:
            return
        submit.disabled = controller.is_submitting
        submit.label = "Registering…" if controller.is_submitting else "Register"
        banner = self.query_one("#reg-banner", Static)
        if controller.submit_error:
            banner.update(format_banner(controller.submit_error, failed=True))
        else:
            banner.update(format_banner(controller.confirmation))

    def _refresh_order(self) -> None:
        controller = self.order
        values = controller.values
        visible = controller.visible_errors
        try:
            size = self.query_one(f"#{_ORDER_PREFIX}size", Select)
            crust = self.query_one(f"#{_ORDER_PREFIX}crust", Select)
            notes = self.query_one(f"#{_ORDER_PREFIX}notes", Input)
        except NoMatches:
            return
        if _select_value(size.value) != values.size:
            size.value = _select_initial(values.size, SIZE_OPTIONS)
        if _select_value(crust.value) != values.crust:
            crust.value = _select_initial(values.crust, CRUST_OPTIONS)
        if notes.value != values.notes:
            notes.value = values.notes

        # Toppings only make sense once a size has been picked.
        self.query_one("#order-toppings-row").display = bool(values.size)
        self.query_one("#order-toppings", Static).update(format_choice_tags(values.toppings, topping_price))
        self.query_one("#order-sides", Static).update(format_choice_tags(values.sides, side_price))
        self.query_one("#order-quantity", Static).update(str(values.quantity))
        for field_name in ("size", "crust", "toppings", "quantity"):
            self.query_one(f"#{_ORDER_PREFIX}{field_name}-error", Static).update(
                format_field_error(visible.get(field_name))
            )

        self.query_one("#order-total", Static).update(format_total(controller.total))
        self.query_one("#order-preview", Static).update(format_order_preview(values, controller.total))
        self.query_one("#order-receipt", Static).update(format_receipt(controller.receipt))
        self.query_one("#order-banner", Static).update(format_banner(controller.submit_error, failed=True))

        submit = self.query_one("#order-submit", Button)
        submit.disabled = controller.is_submitting
        submit.label = "Placing order…" if controller.is_submitting else "Place order"

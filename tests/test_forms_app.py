"""Textual app wiring, driven headless through the pilot."""

import pytest
from textual.widgets import Button, Checkbox, Input, Select

from formdesk.config import ORDER_STORAGE_KEY
from formdesk.constant import REGISTRATION_FIELDS
from formdesk.controller import FormState
from formdesk.forms_app import FormsApp
from formdesk.persistence import MemoryKeyValueStore, encode_snapshot

from fakes import VALID_ORDER, VALID_REGISTRATION, ImmediateSubmitter


async def _press(app, pilot, selector):
    app.query_one(selector, Button).press()
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause()


class TestFormsApp:
    @pytest.mark.asyncio
    async def test_restores_order_snapshot_on_mount(self):
        store = MemoryKeyValueStore({ORDER_STORAGE_KEY: encode_snapshot(VALID_ORDER.patch(notes="Ring twice"))})
        app = FormsApp(store=store, submitter=ImmediateSubmitter())
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one("#order-notes", Input).value == "Ring twice"
            assert app.order.total == 918

    @pytest.mark.asyncio
    async def test_invalid_register_touches_every_field(self):
        app = FormsApp(store=MemoryKeyValueStore(), submitter=ImmediateSubmitter())
        async with app.run_test() as pilot:
            await _press(app, pilot, "#reg-submit")
            assert app.registration.touched == frozenset(REGISTRATION_FIELDS)
            assert app.registration.state is FormState.EDITING

    @pytest.mark.asyncio
    async def test_successful_registration_clears_inputs(self):
        app = FormsApp(store=MemoryKeyValueStore(), submitter=ImmediateSubmitter())
        async with app.run_test() as pilot:
            app.registration.update(**VALID_REGISTRATION.to_dict())
            await pilot.pause()
            await _press(app, pilot, "#reg-submit")
            assert app.registration.confirmation == "Registration successful. Welcome, Ana!"
            assert app.query_one("#reg-name", Input).value == ""

    @pytest.mark.asyncio
    async def test_order_reset_button(self):
        store = MemoryKeyValueStore({ORDER_STORAGE_KEY: encode_snapshot(VALID_ORDER)})
        app = FormsApp(store=store, submitter=ImmediateSubmitter())
        async with app.run_test() as pilot:
            await _press(app, pilot, "#order-submit")
            assert app.order.receipt is not None
            await _press(app, pilot, "#order-reset")
            assert app.order.receipt is None
            assert store.get(ORDER_STORAGE_KEY) is None

    @pytest.mark.asyncio
    async def test_fresh_start_shows_blank_selects(self):
        app = FormsApp(store=MemoryKeyValueStore(), submitter=ImmediateSubmitter())
        async with app.run_test() as pilot:
            await pilot.pause()
            for selector in ("#reg-gender", "#order-size", "#order-crust"):
                assert app.query_one(selector, Select).value is Select.NULL
            assert app.registration.values.gender == ""
            assert app.order.values.size == ""

    @pytest.mark.asyncio
    async def test_leaving_select_and_checkbox_touches_them(self):
        app = FormsApp(store=MemoryKeyValueStore(), submitter=ImmediateSubmitter())
        async with app.run_test() as pilot:
            app.query_one("#reg-gender", Select).focus()
            await pilot.pause()
            app.query_one("#reg-terms", Checkbox).focus()
            await pilot.pause()
            app.query_one("#order-size", Select).focus()
            await pilot.pause()
            app.query_one("#reg-name", Input).focus()
            await pilot.pause()

            assert {"gender", "terms"} <= app.registration.touched
            assert "size" in app.order.touched
            assert app.registration.state is FormState.EDITING

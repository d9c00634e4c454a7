"""Form controllers: input state, touched fields, submission lifecycle."""

from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from formdesk.config import ORDER_STORAGE_KEY, REGISTRATION_STORAGE_KEY
from formdesk.constant import (
    ORDER_FIELDS,
    RECEIPT_ID_MAX,
    RECEIPT_ID_MIN,
    RECEIPT_ID_PREFIX,
    REGISTRATION_FIELDS,
    WELCOME_TEMPLATE,
)
from formdesk.models import OrderInput, Receipt, RegistrationInput
from formdesk.persistence import KeyValueStore, load_snapshot, save_snapshot
from formdesk.pricing import calculate_order_price
from formdesk.submission import SubmissionError, SubmissionResult, Submitter
from formdesk.validation import ErrorMap, validate_order, validate_registration

logger = logging.getLogger(__name__)

_InputT = TypeVar("_InputT", RegistrationInput, OrderInput)


class FormState(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    CONFIRMED = "confirmed"


class SubmitStatus(str, Enum):
    """What a call to ``submit`` ended up doing."""

    INVALID = "invalid"
    BUSY = "busy"
    FAILED = "failed"
    CONFIRMED = "confirmed"
    DISCARDED = "discarded"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class FormController(Generic[_InputT]):
    """Owns one form's input record, touched set and submission state.

    Errors and validity are derived from the current record on every read.
    Every accepted change is written to the store under ``storage_key``.
    """

    storage_key: str
    field_names: tuple[str, ...]
    input_type: type[_InputT]

    def __init__(
        self,
        store: KeyValueStore,
        submitter: Submitter,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.store = store
        self.submitter = submitter
        self.on_change = on_change
        self._values: _InputT = load_snapshot(store, self.storage_key, self.input_type.from_dict, self.input_type)
        self._touched: frozenset[str] = frozenset()
        self.state = FormState.EDITING
        self.submit_error: str | None = None
        # Bumped by reset so a submission started earlier cannot land afterwards.
        self._generation = 0
        # Cleared only when the transport call returns, even if reset ran meanwhile.
        self._in_flight = False

    @property
    def values(self) -> _InputT:
        return self._values

    @property
    def touched(self) -> frozenset[str]:
        return self._touched

    @property
    def errors(self) -> ErrorMap:
        return self.validate(self._values)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def visible_errors(self) -> ErrorMap:
        """Errors for fields the user has already interacted with."""
        return {name: message for name, message in self.errors.items() if name in self._touched}

    @property
    def is_submitting(self) -> bool:
        return self.state is FormState.SUBMITTING

    def validate(self, values: _InputT) -> ErrorMap:
        raise NotImplementedError

    def update(self, **changes: Any) -> _InputT:
        """Apply a patch to the input record and persist the result."""
        patched = self._values.patch(**changes)
        if patched == self._values:
            return self._values
        self._values = patched
        save_snapshot(self.store, self.storage_key, patched)
        return patched

    def touch(self, field_name: str) -> None:
        if field_name not in self.field_names:
            raise ValueError(f"Unknown field for {self.storage_key}: {field_name}")
        self._touched = self._touched | {field_name}

    def touch_all(self) -> None:
        self._touched = frozenset(self.field_names)

    async def submit(self) -> SubmitStatus:
        if self._in_flight or self.state is FormState.SUBMITTING:
            logger.debug("submit_blocked form=%s reason=in_flight", self.storage_key)
            return SubmitStatus.BUSY

        self.touch_all()
        if not self.is_valid:
            logger.debug("submit_blocked form=%s reason=invalid fields=%s", self.storage_key, sorted(self.errors))
            self._notify()
            return SubmitStatus.INVALID

        snapshot = self._values
        generation = self._generation
        self.state = FormState.SUBMITTING
        self.submit_error = None
        logger.debug("submit_start form=%s", self.storage_key)
        self._notify()

        self._in_flight = True
        try:
            result = await self.submitter.submit(snapshot.to_dict())
        except SubmissionError as exc:
            result = SubmissionResult.failure(str(exc) or "Submission failed.")
        except BaseException:
            if generation == self._generation:
                self.state = FormState.EDITING
                self._notify()
            raise
        finally:
            self._in_flight = False

        if generation != self._generation:
            logger.debug("submit_discarded form=%s reason=reset_during_flight", self.storage_key)
            return SubmitStatus.DISCARDED

        if not result.ok:
            self.state = FormState.EDITING
            self.submit_error = result.error or "Submission failed."
            logger.warning("submit_failed form=%s error=%s", self.storage_key, self.submit_error)
            self._notify()
            return SubmitStatus.FAILED

        self.state = FormState.CONFIRMED
        self._on_confirmed(snapshot)
        logger.debug("submit_confirmed form=%s", self.storage_key)
        self._notify()
        return SubmitStatus.CONFIRMED

    def _on_confirmed(self, snapshot: _InputT) -> None:
        raise NotImplementedError

    def reset(self) -> None:
        """Back to the default record with nothing touched, stored or confirmed."""
        self._generation += 1
        self._reset_input()
        self._clear_result()
        self.submit_error = None
        self.state = FormState.EDITING
        logger.debug("reset form=%s", self.storage_key)
        self._notify()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _reset_input(self) -> None:
        self._values = self.input_type()
        self._touched = frozenset()
        self.store.remove(self.storage_key)

    def _clear_result(self) -> None:
        raise NotImplementedError


class RegistrationController(FormController[RegistrationInput]):
    """Registration form; clears its inputs as soon as it is confirmed."""

    storage_key = REGISTRATION_STORAGE_KEY
    field_names = REGISTRATION_FIELDS
    input_type = RegistrationInput

    def __init__(
        self,
        store: KeyValueStore,
        submitter: Submitter,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(store, submitter, on_change)
        self.confirmation: str | None = None

    def validate(self, values: RegistrationInput) -> ErrorMap:
        return validate_registration(values)

    def _on_confirmed(self, snapshot: RegistrationInput) -> None:
        self.confirmation = WELCOME_TEMPLATE.format(name=snapshot.name)
        self._reset_input()

    def _clear_result(self) -> None:
        self.confirmation = None


class OrderController(FormController[OrderInput]):
    """Pizza order form; keeps its inputs visible next to the receipt."""

    storage_key = ORDER_STORAGE_KEY
    field_names = ORDER_FIELDS
    input_type = OrderInput

    def __init__(
        self,
        store: KeyValueStore,
        submitter: Submitter,
        on_change: Callable[[], None] | None = None,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], str] = _utc_now_iso,
    ) -> None:
        super().__init__(store, submitter, on_change)
        self.receipt: Receipt | None = None
        self._rng = rng or random.Random()
        self._clock = clock

    @property
    def total(self) -> int:
        return calculate_order_price(self._values)

    def validate(self, values: OrderInput) -> ErrorMap:
        return validate_order(values)

    def select_size(self, size: str) -> OrderInput:
        return self.update(size=size)

    def select_crust(self, crust: str) -> OrderInput:
        return self.update(crust=crust)

    def toggle_topping(self, topping: str) -> OrderInput:
        return self.update(toppings=_toggled(self._values.toppings, topping))

    def toggle_side(self, side: str) -> OrderInput:
        return self.update(sides=_toggled(self._values.sides, side))

    def set_quantity(self, quantity: int) -> OrderInput:
        return self.update(quantity=quantity)

    def set_notes(self, notes: str) -> OrderInput:
        return self.update(notes=notes)

    def _new_receipt_id(self) -> str:
        return f"{RECEIPT_ID_PREFIX}{self._rng.randint(RECEIPT_ID_MIN, RECEIPT_ID_MAX)}"

    def _on_confirmed(self, snapshot: OrderInput) -> None:
        self.receipt = Receipt(
            id=self._new_receipt_id(),
            timestamp=self._clock(),
            order=snapshot,
            total=calculate_order_price(snapshot),
        )

    def _clear_result(self) -> None:
        self.receipt = None


def _toggled(items: tuple[str, ...], value: str) -> tuple[str, ...]:
    if value in items:
        return tuple(item for item in items if item != value)
    return (*items, value)

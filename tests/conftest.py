"""Shared fixtures: in-memory store and deterministic submitters."""

from __future__ import annotations

import random

import pytest

from fakes import FIXED_TIMESTAMP, ImmediateSubmitter, RecordingStore
from formdesk.controller import OrderController, RegistrationController


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def submitter() -> ImmediateSubmitter:
    return ImmediateSubmitter()


@pytest.fixture
def registration(store: RecordingStore, submitter: ImmediateSubmitter) -> RegistrationController:
    return RegistrationController(store, submitter)


@pytest.fixture
def order(store: RecordingStore, submitter: ImmediateSubmitter) -> OrderController:
    return OrderController(store, submitter, rng=random.Random(7), clock=lambda: FIXED_TIMESTAMP)

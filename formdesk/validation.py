"""Validators producing a field -> message error map for each form."""

from __future__ import annotations

from typing import Callable

from formdesk.constant import ORDER_MESSAGES, REGISTRATION_MESSAGES, TOPPING_REQUIRED_SIZE
from formdesk.models import OrderInput, RegistrationInput
from formdesk.rules import is_email, is_phone, is_positive_int, is_strong_password, match, required

ErrorMap = dict[str, str]

# Each field's checks run in order; the first failing one supplies the message.
_RegistrationRule = tuple[Callable[[RegistrationInput], bool], str]

_REGISTRATION_RULES: list[tuple[str, list[_RegistrationRule]]] = [
    ("name", [(lambda f: required(f.name), "name_required")]),
    (
        "email",
        [
            (lambda f: required(f.email), "email_required"),
            (lambda f: is_email(f.email), "email_invalid"),
        ],
    ),
    (
        "phone",
        [
            (lambda f: required(f.phone), "phone_required"),
            (lambda f: is_phone(f.phone), "phone_invalid"),
        ],
    ),
    (
        "password",
        [
            (lambda f: required(f.password), "password_required"),
            (lambda f: is_strong_password(f.password), "password_weak"),
        ],
    ),
    (
        "confirm_password",
        [
            (lambda f: required(f.confirm_password), "confirm_required"),
            (lambda f: match(f.password, f.confirm_password), "confirm_mismatch"),
        ],
    ),
    ("gender", [(lambda f: required(f.gender), "gender_required")]),
    ("terms", [(lambda f: bool(f.terms), "terms_required")]),
]


def validate_registration(form: RegistrationInput) -> ErrorMap:
    """Return messages for every registration field that currently fails."""
    errors: ErrorMap = {}
    for field_name, checks in _REGISTRATION_RULES:
        for check, message_key in checks:
            if not check(form):
                errors[field_name] = REGISTRATION_MESSAGES[message_key]
                break
    return errors


def validate_order(order: OrderInput) -> ErrorMap:
    """Return messages for every order field that currently fails."""
    errors: ErrorMap = {}
    if not required(order.size):
        errors["size"] = ORDER_MESSAGES["size_required"]
    if not required(order.crust):
        errors["crust"] = ORDER_MESSAGES["crust_required"]
    if not is_positive_int(order.quantity):
        errors["quantity"] = ORDER_MESSAGES["quantity_invalid"]
    if order.size == TOPPING_REQUIRED_SIZE and not order.toppings:
        errors["toppings"] = ORDER_MESSAGES["toppings_required"]
    return errors

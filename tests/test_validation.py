"""Registration and order validators."""

import pytest

from formdesk.constant import ORDER_FIELDS, ORDER_MESSAGES, REGISTRATION_FIELDS, REGISTRATION_MESSAGES
from formdesk.models import OrderInput, RegistrationInput
from formdesk.validation import validate_order, validate_registration

from fakes import VALID_ORDER, VALID_REGISTRATION


class TestValidateRegistration:
    def test_valid_record_has_no_errors(self):
        assert validate_registration(VALID_REGISTRATION) == {}

    def test_empty_record_flags_every_field(self):
        errors = validate_registration(RegistrationInput())
        assert list(errors) == list(REGISTRATION_FIELDS)
        assert errors["email"] == REGISTRATION_MESSAGES["email_required"]
        assert errors["confirm_password"] == REGISTRATION_MESSAGES["confirm_required"]
        assert errors["terms"] == REGISTRATION_MESSAGES["terms_required"]

    def test_presence_checked_before_shape(self):
        errors = validate_registration(VALID_REGISTRATION.patch(email="   "))
        assert errors == {"email": REGISTRATION_MESSAGES["email_required"]}

    def test_shape_errors(self):
        errors = validate_registration(VALID_REGISTRATION.patch(email="ana@x", phone="12345"))
        assert errors == {
            "email": REGISTRATION_MESSAGES["email_invalid"],
            "phone": REGISTRATION_MESSAGES["phone_invalid"],
        }

    def test_mismatch_reported_even_when_password_is_weak(self):
        errors = validate_registration(VALID_REGISTRATION.patch(password="weak", confirm_password="other"))
        assert errors["password"] == REGISTRATION_MESSAGES["password_weak"]
        assert errors["confirm_password"] == REGISTRATION_MESSAGES["confirm_mismatch"]

    def test_mismatch_reported_when_password_is_strong(self):
        errors = validate_registration(VALID_REGISTRATION.patch(confirm_password="Abcdef1?"))
        assert errors == {"confirm_password": REGISTRATION_MESSAGES["confirm_mismatch"]}

    def test_terms_must_be_accepted(self):
        errors = validate_registration(VALID_REGISTRATION.patch(terms=False))
        assert errors == {"terms": REGISTRATION_MESSAGES["terms_required"]}

    def test_keys_are_declared_fields(self):
        errors = validate_registration(RegistrationInput(password="x"))
        assert set(errors) <= set(REGISTRATION_FIELDS)


class TestValidateOrder:
    def test_valid_large_order(self):
        assert validate_order(VALID_ORDER) == {}

    def test_blank_order_with_zero_quantity(self):
        errors = validate_order(OrderInput(quantity=0))
        assert errors == {
            "size": ORDER_MESSAGES["size_required"],
            "crust": ORDER_MESSAGES["crust_required"],
            "quantity": ORDER_MESSAGES["quantity_invalid"],
        }

    def test_large_requires_a_topping(self):
        errors = validate_order(VALID_ORDER.patch(toppings=()))
        assert errors == {"toppings": ORDER_MESSAGES["toppings_required"]}

    @pytest.mark.parametrize("topping", ["Mushroom", "Jalapeno", "Olive", "Paneer", "Corn", "Chicken"])
    def test_any_single_topping_satisfies_large(self, topping):
        assert "toppings" not in validate_order(VALID_ORDER.patch(toppings=(topping,)))

    @pytest.mark.parametrize("size", ["Small", "Medium"])
    def test_smaller_sizes_do_not_need_toppings(self, size):
        assert validate_order(VALID_ORDER.patch(size=size, toppings=())) == {}

    @pytest.mark.parametrize("quantity", [0, -1, True, 1.5])
    def test_quantity_must_be_positive_int(self, quantity):
        errors = validate_order(VALID_ORDER.patch(quantity=quantity))
        assert errors == {"quantity": ORDER_MESSAGES["quantity_invalid"]}

    def test_keys_are_declared_fields(self):
        assert set(validate_order(OrderInput(size="Large", quantity=0))) <= set(ORDER_FIELDS)

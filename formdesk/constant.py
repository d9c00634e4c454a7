"""Editable static option, price and message configuration."""

from __future__ import annotations

SIZE_PRICES: dict[str, int] = {
    "Small": 199,
    "Medium": 299,
    "Large": 399,
}

CRUST_PRICES: dict[str, int] = {
    "Thin": 30,
    "Regular": 0,
    "CheeseBurst": 60,
}

TOPPING_PRICES: dict[str, int] = {
    "Mushroom": 30,
    "Jalapeno": 30,
    "Olive": 40,
    "Paneer": 50,
    "Corn": 25,
    "Chicken": 60,
}

SIDE_PRICES: dict[str, int] = {
    "Coke": 49,
    "Pepsi": 49,
    "GarlicBread": 99,
    "CheeseDip": 39,
}

# Size that requires at least one topping.
TOPPING_REQUIRED_SIZE = "Large"

GENDER_OPTIONS: list[str] = ["Male", "Female", "Non-binary", "Prefer not to say"]

REGISTRATION_FIELDS: tuple[str, ...] = (
    "name",
    "email",
    "phone",
    "password",
    "confirm_password",
    "gender",
    "terms",
)

ORDER_FIELDS: tuple[str, ...] = ("size", "crust", "toppings", "sides", "quantity", "notes")

REGISTRATION_MESSAGES: dict[str, str] = {
    "name_required": "Name is required.",
    "email_required": "Email is required.",
    "email_invalid": "Enter a valid email.",
    "phone_required": "Phone is required.",
    "phone_invalid": "Enter a valid phone number.",
    "password_required": "Password is required.",
    "password_weak": "Use 8+ chars, with uppercase, lowercase, number, and a special character.",
    "confirm_required": "Confirm your password.",
    "confirm_mismatch": "Passwords do not match.",
    "gender_required": "Select a gender.",
    "terms_required": "You must accept Terms & Conditions.",
}

ORDER_MESSAGES: dict[str, str] = {
    "size_required": "Choose a size.",
    "crust_required": "Select a crust.",
    "quantity_invalid": "Quantity must be a positive integer.",
    "toppings_required": "Large pizzas require at least 1 topping.",
}

WELCOME_TEMPLATE = "Registration successful. Welcome, {name}!"

RECEIPT_ID_PREFIX = "ORD-"
RECEIPT_ID_MIN = 100000
RECEIPT_ID_MAX = 999999

"""Domain models for formdesk."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, TypeVar

_RecordT = TypeVar("_RecordT", bound="_InputRecord")


class SnapshotDecodeError(ValueError):
    """Raised when a persisted snapshot cannot be turned back into an input record."""


def _expect_str(data: dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise SnapshotDecodeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _expect_bool(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise SnapshotDecodeError(f"{key} must be a boolean, got {type(value).__name__}")
    return value


def _expect_str_tuple(data: dict[str, Any], key: str) -> tuple[str, ...]:
    value = data.get(key, [])
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise SnapshotDecodeError(f"{key} must be a list of strings")
    # Duplicates collapse; first occurrence keeps its display position.
    return tuple(dict.fromkeys(value))


def _expect_int(data: dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool):
        raise SnapshotDecodeError(f"{key} must be an integer, got bool")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise SnapshotDecodeError(f"{key} must be an integer, got {type(value).__name__}")
    return value


class _InputRecord:
    """Shared behaviour for immutable form input records."""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))  # type: ignore[arg-type]

    def patch(self: _RecordT, **changes: Any) -> _RecordT:
        """Return a copy with ``changes`` applied; unknown field names are rejected."""
        unknown = set(changes) - set(self.field_names())
        if unknown:
            raise ValueError(f"Unknown field(s) for {type(self).__name__}: {', '.join(sorted(unknown))}")
        return replace(self, **changes)  # type: ignore[type-var]

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)  # type: ignore[call-overload]
        for key, value in data.items():
            if isinstance(value, tuple):
                data[key] = list(value)
        return data


@dataclass(frozen=True)
class RegistrationInput(_InputRecord):
    """Everything the registration form holds."""

    name: str = ""
    email: str = ""
    phone: str = ""
    password: str = ""
    confirm_password: str = ""
    gender: str = ""
    terms: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> RegistrationInput:
        if not isinstance(data, dict):
            raise SnapshotDecodeError("registration snapshot must be an object")
        return cls(
            name=_expect_str(data, "name", ""),
            email=_expect_str(data, "email", ""),
            phone=_expect_str(data, "phone", ""),
            password=_expect_str(data, "password", ""),
            confirm_password=_expect_str(data, "confirm_password", ""),
            gender=_expect_str(data, "gender", ""),
            terms=_expect_bool(data, "terms", False),
        )


@dataclass(frozen=True)
class OrderInput(_InputRecord):
    """A pizza order selection. Toppings and sides behave as ordered sets."""

    size: str = ""
    crust: str = ""
    toppings: tuple[str, ...] = ()
    sides: tuple[str, ...] = ()
    quantity: int = 1
    notes: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> OrderInput:
        if not isinstance(data, dict):
            raise SnapshotDecodeError("order snapshot must be an object")
        return cls(
            size=_expect_str(data, "size", ""),
            crust=_expect_str(data, "crust", ""),
            toppings=_expect_str_tuple(data, "toppings"),
            sides=_expect_str_tuple(data, "sides"),
            quantity=_expect_int(data, "quantity", 1),
            notes=_expect_str(data, "notes", ""),
        )


@dataclass(frozen=True)
class Receipt:
    """Confirmation record for one successful order submission."""

    id: str
    timestamp: str
    order: OrderInput
    total: int

# =============================================================================
# core/validation.py - Request Validation Rules
# =============================================================================
# Each rule is a pure function that inspects one field of a request and
# returns zero or one FieldError. Routes declare an ordered tuple of rules
# and run them through validate(), which collects every error in order.
#
# Usage:
#   errors = validate(CREATE_PRODUCT_RULES, RequestData(body=payload))
#   if errors:
#       raise ValidationFailedError(errors)
# =============================================================================

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Literal

from core.models.product import FieldError

# Sentinel for a field absent from the request (distinct from JSON null)
MISSING: Any = object()

INT_PATTERN = re.compile(r"^[-+]?[0-9]+$")
NUMERIC_PATTERN = re.compile(r"^[+-]?([0-9]*[.])?[0-9]+$")
BOOLEAN_STRINGS = frozenset({"true", "false", "1", "0"})
TRUE_STRINGS = frozenset({"true", "1"})

Location = Literal["params", "body"]


@dataclass(frozen=True)
class RequestData:
    """The parts of a request the rules are allowed to look at."""
    params: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)

    def get(self, location: Location, name: str) -> Any:
        source = self.params if location == "params" else self.body
        return source.get(name, MISSING)


Rule = Callable[[RequestData], "list[FieldError]"]


# =============================================================================
# Value Helpers
# =============================================================================

def to_text(value: Any) -> str:
    """
    String form of a submitted value, as the string checks see it.

    Missing and null become "", booleans are lowercase, containers
    become their JSON text.
    """
    if value is MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float, str)):
        return str(value)
    return json.dumps(value)


def to_number(value: Any) -> float:
    """
    Loose numeric coercion used by the "greater than" check.

    Anything that cannot be read as a number becomes NaN, so every
    comparison against it is false.
    """
    if value is MISSING or value is None:
        return float("nan")
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return float("inf") if value > 0 else float("-inf")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return float("nan")
    return float("nan")


def to_bool(value: Any) -> bool:
    """Boolean form of a value that already passed is_boolean()."""
    if isinstance(value, bool):
        return value
    return to_text(value).lower() in TRUE_STRINGS


def _error(location: Location, name: str, value: Any, msg: str) -> FieldError:
    return FieldError(
        value=None if value is MISSING else value,
        msg=msg,
        path=name,
        location=location,
    )


# =============================================================================
# Rule Factories
# =============================================================================

def is_int(name: str, msg: str, location: Location = "params") -> Rule:
    """Value must be a decimal integer. Range and existence are not checked."""
    def rule(data: RequestData) -> list[FieldError]:
        value = data.get(location, name)
        if INT_PATTERN.match(to_text(value)):
            return []
        return [_error(location, name, value, msg)]
    return rule


def not_empty(name: str, msg: str, location: Location = "body") -> Rule:
    """Value must be present and its string form non-empty."""
    def rule(data: RequestData) -> list[FieldError]:
        value = data.get(location, name)
        if to_text(value) != "":
            return []
        return [_error(location, name, value, msg)]
    return rule


def is_numeric(name: str, msg: str, location: Location = "body") -> Rule:
    """String form of the value must look like a decimal number."""
    def rule(data: RequestData) -> list[FieldError]:
        value = data.get(location, name)
        if NUMERIC_PATTERN.match(to_text(value)):
            return []
        return [_error(location, name, value, msg)]
    return rule


def greater_than(name: str, limit: float, msg: str, location: Location = "body") -> Rule:
    """Value, loosely coerced to a number, must be strictly above limit."""
    def rule(data: RequestData) -> list[FieldError]:
        value = data.get(location, name)
        if to_number(value) > limit:
            return []
        return [_error(location, name, value, msg)]
    return rule


def is_boolean(name: str, msg: str, location: Location = "body") -> Rule:
    """Value must be true/false, 1/0 or one of their string forms."""
    def rule(data: RequestData) -> list[FieldError]:
        value = data.get(location, name)
        if to_text(value) in BOOLEAN_STRINGS:
            return []
        return [_error(location, name, value, msg)]
    return rule


# =============================================================================
# Runner
# =============================================================================

def validate(rules: tuple[Rule, ...] | list[Rule], data: RequestData) -> list[FieldError]:
    """Run every rule in order and collect all errors."""
    errors: list[FieldError] = []
    for rule in rules:
        errors.extend(rule(data))
    return errors


# =============================================================================
# Rule Sets
# =============================================================================

ID_RULES: tuple[Rule, ...] = (
    is_int("id", "Id not valid"),
)

NAME_RULES: tuple[Rule, ...] = (
    not_empty("name", "Name is required"),
)

# All three price checks run independently; a missing price fails each one.
PRICE_RULES: tuple[Rule, ...] = (
    is_numeric("price", "Price must be a number"),
    not_empty("price", "Price is required"),
    greater_than("price", 0, "Price must be greater than 0"),
)

AVAILABILITY_RULES: tuple[Rule, ...] = (
    is_boolean("availability", "Availability not valid"),
)

CREATE_PRODUCT_RULES = NAME_RULES + PRICE_RULES
UPDATE_PRODUCT_RULES = ID_RULES + NAME_RULES + PRICE_RULES + AVAILABILITY_RULES

# =============================================================================
# tests/test_validation.py - Validation Rule Tests
# =============================================================================
# Unit tests for the field rules and the sequential runner:
# - Each rule returns zero or one error
# - Rule sets produce the documented error counts and messages
# - Loose coercion of strings, booleans and missing values
#
# Run with: pytest tests/test_validation.py -v
# =============================================================================

import pytest

from core.validation import (
    CREATE_PRODUCT_RULES,
    ID_RULES,
    MISSING,
    UPDATE_PRODUCT_RULES,
    RequestData,
    greater_than,
    is_boolean,
    is_int,
    is_numeric,
    not_empty,
    to_bool,
    to_number,
    to_text,
    validate,
)


def messages(errors):
    return [error.msg for error in errors]


# =============================================================================
# Value Helper Tests
# =============================================================================

class TestToText:
    """Tests for the string form used by the string checks."""

    def test_missing_and_null_are_empty(self):
        assert to_text(MISSING) == ""
        assert to_text(None) == ""

    def test_booleans_are_lowercase(self):
        assert to_text(True) == "true"
        assert to_text(False) == "false"

    def test_numbers(self):
        assert to_text(150) == "150"
        assert to_text(150.0) == "150"
        assert to_text(19.99) == "19.99"

    def test_containers_become_json(self):
        assert to_text({"a": 1}) == '{"a": 1}'
        assert to_text([]) == "[]"


class TestToNumber:
    """Tests for the loose numeric coercion."""

    def test_numeric_strings(self):
        assert to_number("150") == 150.0
        assert to_number(" 2.5 ") == 2.5

    def test_empty_string_is_zero(self):
        assert to_number("") == 0.0

    def test_unparsable_is_never_greater(self):
        assert not to_number("abc") > 0
        assert not to_number(MISSING) > 0
        assert not to_number(None) > 0
        assert not to_number({"price": 1}) > 0

    def test_booleans(self):
        assert to_number(True) == 1.0
        assert to_number(False) == 0.0

    def test_oversized_int_is_infinite(self):
        assert to_number(10 ** 400) == float("inf")
        assert to_number(-(10 ** 400)) == float("-inf")


class TestToBool:
    """Tests for converting validated availability values."""

    @pytest.mark.parametrize("value", [True, "true", "TRUE", 1, "1"])
    def test_truthy(self, value):
        assert to_bool(value) is True

    @pytest.mark.parametrize("value", [False, "false", 0, "0"])
    def test_falsy(self, value):
        assert to_bool(value) is False


# =============================================================================
# Single Rule Tests
# =============================================================================

class TestIsInt:
    """Tests for the path id rule."""

    rule = staticmethod(is_int("id", "Id not valid"))

    @pytest.mark.parametrize("value", ["1", "1000", "-3", "+7", "007"])
    def test_accepts_integers(self, value):
        assert self.rule(RequestData(params={"id": value})) == []

    @pytest.mark.parametrize("value", ["not-valid-url", "1.5", "", "1e3", " 1"])
    def test_rejects_non_integers(self, value):
        errors = self.rule(RequestData(params={"id": value}))
        assert messages(errors) == ["Id not valid"]

    def test_error_locates_the_field(self):
        [error] = self.rule(RequestData(params={"id": "abc"}))
        assert error.path == "id"
        assert error.location == "params"
        assert error.value == "abc"
        assert error.type == "field"


class TestNotEmpty:
    """Tests for the required-field rule."""

    rule = staticmethod(not_empty("name", "Name is required"))

    def test_missing_field(self):
        [error] = self.rule(RequestData(body={}))
        assert error.msg == "Name is required"
        assert error.value is None

    def test_empty_string(self):
        assert len(self.rule(RequestData(body={"name": ""}))) == 1

    def test_null(self):
        assert len(self.rule(RequestData(body={"name": None}))) == 1

    def test_zero_is_not_empty(self):
        assert self.rule(RequestData(body={"name": 0})) == []

    def test_whitespace_is_not_empty(self):
        assert self.rule(RequestData(body={"name": " "})) == []


class TestIsNumeric:
    """Tests for the numeric rule."""

    rule = staticmethod(is_numeric("price", "Price must be a number"))

    @pytest.mark.parametrize("value", [150, 0, -5, 19.99, "150", "-1.5", ".5"])
    def test_accepts_numbers(self, value):
        assert self.rule(RequestData(body={"price": value})) == []

    @pytest.mark.parametrize("value", ["abc", "", "1,5", "1e3", True, None, [1]])
    def test_rejects_non_numbers(self, value):
        assert messages(self.rule(RequestData(body={"price": value}))) == ["Price must be a number"]


class TestGreaterThan:
    """Tests for the strictly-positive rule."""

    rule = staticmethod(greater_than("price", 0, "Price must be greater than 0"))

    @pytest.mark.parametrize("value", [0.01, 1, "3"])
    def test_accepts_positive(self, value):
        assert self.rule(RequestData(body={"price": value})) == []

    @pytest.mark.parametrize("value", [0, -1, "0", "-2", "abc", ""])
    def test_rejects_zero_negative_and_garbage(self, value):
        assert len(self.rule(RequestData(body={"price": value}))) == 1

    def test_rejects_missing(self):
        assert len(self.rule(RequestData(body={}))) == 1


class TestIsBoolean:
    """Tests for the availability rule."""

    rule = staticmethod(is_boolean("availability", "Availability not valid"))

    @pytest.mark.parametrize("value", [True, False, 1, 0, "true", "false", "1", "0"])
    def test_accepts_booleans(self, value):
        assert self.rule(RequestData(body={"availability": value})) == []

    @pytest.mark.parametrize("value", ["yes", 2, "", None, "True"])
    def test_rejects_others(self, value):
        assert messages(self.rule(RequestData(body={"availability": value}))) == ["Availability not valid"]

    def test_rejects_missing(self):
        assert len(self.rule(RequestData(body={}))) == 1


# =============================================================================
# Rule Set Tests
# =============================================================================

class TestCreateRules:
    """Error counts for POST bodies."""

    def test_empty_body_yields_four_errors(self):
        errors = validate(CREATE_PRODUCT_RULES, RequestData(body={}))
        assert messages(errors) == [
            "Name is required",
            "Price must be a number",
            "Price is required",
            "Price must be greater than 0",
        ]

    @pytest.mark.parametrize("price", [0, -1, -0.5, "0"])
    def test_non_positive_price_yields_one_error(self, price):
        errors = validate(CREATE_PRODUCT_RULES, RequestData(body={"name": "Mouse", "price": price}))
        assert messages(errors) == ["Price must be greater than 0"]

    @pytest.mark.parametrize("price", ["abc", "ten", "12abc"])
    def test_non_numeric_price_yields_two_errors(self, price):
        errors = validate(CREATE_PRODUCT_RULES, RequestData(body={"name": "Mouse", "price": price}))
        assert messages(errors) == ["Price must be a number", "Price must be greater than 0"]

    def test_valid_body(self):
        assert validate(CREATE_PRODUCT_RULES, RequestData(body={"name": "Mouse", "price": 150})) == []

    def test_oversized_price_does_not_raise(self):
        body = {"name": "Mouse", "price": 10 ** 400}
        assert validate(CREATE_PRODUCT_RULES, RequestData(body=body)) == []

    def test_oversized_negative_price_is_not_positive(self):
        body = {"name": "Mouse", "price": -(10 ** 400)}
        errors = validate(CREATE_PRODUCT_RULES, RequestData(body=body))
        assert messages(errors) == ["Price must be greater than 0"]

    def test_input_is_not_mutated(self):
        body = {"name": "Mouse", "price": "abc"}
        validate(CREATE_PRODUCT_RULES, RequestData(body=body))
        assert body == {"name": "Mouse", "price": "abc"}


class TestUpdateRules:
    """Error counts for PUT requests."""

    def test_empty_body_yields_five_errors(self):
        errors = validate(UPDATE_PRODUCT_RULES, RequestData(params={"id": "1"}, body={}))
        assert len(errors) == 5
        assert messages(errors)[-1] == "Availability not valid"

    def test_invalid_id_with_valid_body(self):
        data = RequestData(
            params={"id": "not-valid-url"},
            body={"name": "Mouse", "price": 150, "availability": True},
        )
        assert messages(validate(UPDATE_PRODUCT_RULES, data)) == ["Id not valid"]

    def test_errors_keep_rule_order(self):
        data = RequestData(params={"id": "x"}, body={"price": 0, "availability": "maybe"})
        assert messages(validate(UPDATE_PRODUCT_RULES, data)) == [
            "Id not valid",
            "Name is required",
            "Price must be greater than 0",
            "Availability not valid",
        ]


def test_id_rules_alone():
    assert validate(ID_RULES, RequestData(params={"id": "42"})) == []

import math

import pytest

from niml.coercion.coercion import to_boolean, to_float, to_integer, to_unsigned
from niml.errors import CoercionError


class TestToInteger:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("42", 42),
            (" -7 ", -7),
            ("+3", 3),
            ("007", 7),
            (12, 12),
            (3.9, 3),
            (-3.9, -3),
            ("9223372036854775807", 2**63 - 1),
        ],
    )
    def test_accepted_values(self, value: object, expected: int) -> None:
        assert to_integer(value) == expected

    @pytest.mark.parametrize(
        "value", ["notanumber", "", "1.5", "1_000", "1 000", "0x10", "9223372036854775808"]
    )
    def test_rejected_strings(self, value: str) -> None:
        with pytest.raises(CoercionError):
            to_integer(value)

    def test_unsupported_type(self) -> None:
        with pytest.raises(CoercionError, match="unsupported source type for integer"):
            to_integer(["1"])

    def test_bool_is_not_an_integer(self) -> None:
        with pytest.raises(CoercionError):
            to_integer(True)

    def test_non_finite_float(self) -> None:
        with pytest.raises(CoercionError, match="non-finite"):
            to_integer(math.inf)

    def test_error_carries_value_and_target(self) -> None:
        with pytest.raises(CoercionError) as exc_info:
            to_integer("abc")

        assert exc_info.value.value == "abc"
        assert exc_info.value.target == "integer"
        assert isinstance(exc_info.value, ValueError)


class TestToUnsigned:
    def test_accepts_values_above_signed_range(self) -> None:
        assert to_unsigned("18446744073709551615") == 2**64 - 1

    def test_negative_is_rejected_not_wrapped(self) -> None:
        with pytest.raises(CoercionError, match="unsigned"):
            to_unsigned("-1")

    def test_too_large(self) -> None:
        with pytest.raises(CoercionError, match="out of range"):
            to_unsigned("18446744073709551616")

    def test_plain_int(self) -> None:
        assert to_unsigned(8080) == 8080


class TestToFloat:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("3.14", 3.14),
            (" 1e3 ", 1000.0),
            ("-.5", -0.5),
            ("2", 2.0),
            (2, 2.0),
            (2.5, 2.5),
        ],
    )
    def test_accepted_values(self, value: object, expected: float) -> None:
        assert to_float(value) == expected

    def test_infinity_spellings(self) -> None:
        assert to_float("inf") == math.inf
        assert to_float("-Infinity") == -math.inf

    def test_nan(self) -> None:
        assert math.isnan(to_float("NaN"))

    @pytest.mark.parametrize(
        "value", ["abc", "", "1_0", "1.2.3", "\u0661\u0662", "\uff11"]
    )
    def test_rejected_strings(self, value: str) -> None:
        with pytest.raises(CoercionError, match="invalid syntax for float"):
            to_float(value)

    def test_overflow_is_an_error(self) -> None:
        with pytest.raises(CoercionError, match="out of range"):
            to_float("1e400")

    def test_unsupported_type(self) -> None:
        with pytest.raises(CoercionError, match="unsupported source type for float"):
            to_float(None)


class TestToBoolean:
    @pytest.mark.parametrize("value", ["1", "t", "T", "TRUE", "true", "True", " true "])
    def test_true_tokens(self, value: str) -> None:
        assert to_boolean(value) is True

    @pytest.mark.parametrize("value", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false_tokens(self, value: str) -> None:
        assert to_boolean(value) is False

    @pytest.mark.parametrize("value", ["yes", "no", "tRUE", "on", "", "2"])
    def test_rejected_strings(self, value: str) -> None:
        with pytest.raises(CoercionError, match="invalid syntax for boolean"):
            to_boolean(value)

    def test_bool_passes_through(self) -> None:
        assert to_boolean(False) is False

    def test_int_is_unsupported(self) -> None:
        with pytest.raises(CoercionError, match="unsupported source type for boolean"):
            to_boolean(1)

# src/niml/coercion/coercion.py

"""String-to-scalar conversions used by the record filler.

Pure functions. A failed conversion always raises ``CoercionError``;
nothing here falls back to a default value.
"""

import math
import re

from niml.errors import CoercionError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_INFINITY_RE = re.compile(r"[+-]?inf(inity)?", re.IGNORECASE)

TRUE_TOKENS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_TOKENS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def to_integer(value: object) -> int:
    """Convert ``value`` to a signed 64-bit integer.

    Args:
        value: A base-10 integer string (surrounding whitespace allowed),
            an int, or a float (truncated toward zero).

    Returns:
        The integer value.

    Raises:
        CoercionError: If the string is not a base-10 integer, the value is
            out of the signed 64-bit range, or the type is unsupported.
    """
    if isinstance(value, bool):
        raise _unsupported(value, "integer")

    if isinstance(value, int):
        result = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise CoercionError(
                f"cannot convert non-finite float {value!r} to integer",
                value=value,
                target="integer",
            )
        result = math.trunc(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _INTEGER_RE.fullmatch(text):
            raise CoercionError(
                f"invalid syntax for integer: {value!r}",
                value=value,
                target="integer",
            )
        result = int(text)
    else:
        raise _unsupported(value, "integer")

    if not INT64_MIN <= result <= INT64_MAX:
        raise CoercionError(
            f"value out of range for integer: {value!r}",
            value=value,
            target="integer",
        )
    return result


def to_unsigned(value: object) -> int:
    """Convert ``value`` like ``to_integer``, then require ``0 <= n <= 2**64-1``.

    Negative numbers are rejected instead of wrapping around.
    """
    if isinstance(value, str) and _INTEGER_RE.fullmatch(value.strip()):
        # Parse directly so values above INT64_MAX stay reachable
        result = int(value.strip())
    else:
        result = to_integer(value)

    if not 0 <= result <= UINT64_MAX:
        raise CoercionError(
            f"value out of range for unsigned integer: {value!r}",
            value=value,
            target="unsigned integer",
        )
    return result


def to_float(value: object) -> float:
    """Convert ``value`` to a float.

    Strings accept decimal and exponential notation as well as
    ``inf``/``infinity``/``nan`` spellings. Ints and floats are widened.
    """
    if isinstance(value, bool):
        raise _unsupported(value, "float")
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        raise _unsupported(value, "float")

    text = value.strip()
    if "_" in text or not text.isascii():
        raise CoercionError(
            f"invalid syntax for float: {value!r}", value=value, target="float"
        )
    try:
        result = float(text)
    except ValueError:
        raise CoercionError(
            f"invalid syntax for float: {value!r}", value=value, target="float"
        ) from None

    if math.isinf(result) and not _INFINITY_RE.fullmatch(text):
        raise CoercionError(
            f"value out of range for float: {value!r}", value=value, target="float"
        )
    return result


def to_boolean(value: object) -> bool:
    """Convert ``value`` to a bool.

    Accepts a bool, or one of the case-sensitive tokens
    ``1 t T TRUE true True`` / ``0 f F FALSE false False``.
    """
    if isinstance(value, bool):
        return value
    if not isinstance(value, str):
        raise _unsupported(value, "boolean")

    text = value.strip()
    if text in TRUE_TOKENS:
        return True
    if text in FALSE_TOKENS:
        return False
    raise CoercionError(
        f"invalid syntax for boolean: {value!r}", value=value, target="boolean"
    )


def _unsupported(value: object, target: str) -> CoercionError:
    return CoercionError(
        f"unsupported source type for {target} conversion: {type(value).__name__}",
        value=value,
        target=target,
    )

from .coercion import to_boolean, to_float, to_integer, to_unsigned

__all__ = [
    "to_boolean",
    "to_float",
    "to_integer",
    "to_unsigned",
]

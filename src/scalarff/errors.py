"""
Field Arithmetic Errors

Every failure the library can report is a FieldError. Each one also
derives from the builtin exception a caller would naturally catch
(ZeroDivisionError, ValueError, TypeError), so generic handlers keep
working.

Out-of-range integers are never an error: construction always reduces
mod p.
"""


class FieldError(Exception):
    """Base class for field arithmetic errors."""


class DivisionByZero(FieldError, ZeroDivisionError):
    """The additive identity has no multiplicative inverse."""

    def __init__(self, field_name: str):
        super().__init__(f"Cannot invert zero in field {field_name}")
        self.field_name = field_name


class NotAResidue(FieldError, ValueError):
    """Square root requested for a quadratic non-residue."""

    def __init__(self, field_name: str, value: int):
        super().__init__(f"{value} is not a quadratic residue in field {field_name}")
        self.field_name = field_name
        self.value = value


class DeserializationError(FieldError, ValueError):
    """Input bytes or text cannot represent a field element."""


class FieldMismatchError(FieldError, TypeError):
    """Arithmetic between elements of two different fields."""

    def __init__(self, left: str, right: str):
        super().__init__(f"Cannot combine elements of {left} and {right}")
        self.left = left
        self.right = right

"""
Canonical Integer Bridge

Lossless conversion between a field element's backend representation
and a plain Python int in [0, p).

Every backend keeps its own native form (a Python int, a gmpy2.mpz, a
py_ecc field element). Nothing outside a backend ever sees that form:
values leave through to_biguint() and enter through from_biguint(),
and both reduce mod p so a backend's signed or unreduced encoding can
never become observable.
"""

from __future__ import annotations
import operator
from typing import TYPE_CHECKING, Type, TypeVar

if TYPE_CHECKING:
    from .element import FieldElement

F = TypeVar('F', bound='FieldElement')


def canonical_int(field: Type[FieldElement], value) -> int:
    """
    Reduce any integer into [0, p) for the given field.

    Accepts int, bool and anything implementing __index__ (gmpy2.mpz,
    numpy integers). Floats and strings are rejected with TypeError.
    """
    return operator.index(value) % field.MODULUS


def to_biguint(element: FieldElement) -> int:
    """Canonical representative of an element as a Python int."""
    return int(element._to_int()) % element.MODULUS


def from_biguint(field: Type[F], value) -> F:
    """Field element for an arbitrary integer (reduced mod p first)."""
    return field._wrap(field._from_int(canonical_int(field, value)))


def same_integer(a: FieldElement, b: FieldElement) -> bool:
    """
    True if two elements have the same canonical integer.

    The elements may belong to different fields. This is a diagnostic on
    raw values, not field equality: Goldilocks 5 and BN254 5 match here
    but are never == to each other.
    """
    return to_biguint(a) == to_biguint(b)


def int_to_bytes(value: int, length: int) -> bytes:
    """Little-endian encoding of a non-negative int in exactly `length` bytes."""
    return int(value).to_bytes(length, 'little')


def bytes_to_int(data: bytes) -> int:
    """Little-endian decoding."""
    return int.from_bytes(bytes(data), 'little')


# Digits per int() call when parsing decimal text. CPython refuses
# str-to-int conversions above a configurable digit limit that can be
# lowered to no less than 640.
DECIMAL_CHUNK_DIGITS = 512


def decimal_to_int(text: str, modulus: int) -> int:
    """
    Value of a decimal digit string reduced mod `modulus`.

    Works for strings of any length by folding fixed-size chunks.
    """
    value = 0
    for i in range(0, len(text), DECIMAL_CHUNK_DIGITS):
        chunk = text[i:i + DECIMAL_CHUNK_DIGITS]
        value = (value * 10 ** len(chunk) + int(chunk)) % modulus
    return value

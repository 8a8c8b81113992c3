"""
Custom Prime Fields

custom_field() builds a native-int field class for any prime modulus.
Intended for tests and teaching: small fields such as F_13 can be
checked exhaustively against brute force.
"""

from __future__ import annotations
import operator
import re
from typing import Optional, Type

import gmpy2

from .native import NativeFieldElement


def custom_field(name: str, modulus: int, byte_len: Optional[int] = None) -> Type[NativeFieldElement]:
    """
    Create a field class with the given prime modulus.

    Args:
        name: short identifier returned by name()
        modulus: a prime; composite moduli raise ValueError
        byte_len: serialized width, minimal for the modulus by default

    Example:
        >>> F13 = custom_field("f13", 13)
        >>> F13(7) * F13(7)
        F13FieldElement(10)
    """
    modulus = operator.index(modulus)
    if modulus < 2 or not gmpy2.is_prime(modulus):
        raise ValueError(f"Field modulus must be prime, got {modulus}")
    if byte_len is None:
        byte_len = max(1, ((modulus - 1).bit_length() + 7) // 8)
    elif byte_len * 8 < (modulus - 1).bit_length():
        raise ValueError(f"{byte_len} bytes cannot hold elements of F_{modulus}")

    class_name = ''.join(part.capitalize() for part in re.split(r'[^0-9A-Za-z]+', name) if part)
    return type(
        f"{class_name}FieldElement",
        (NativeFieldElement,),
        {
            '__slots__': (),
            '__module__': __name__,
            'NAME': name,
            'MODULUS': modulus,
            'BYTE_LEN': byte_len,
        },
    )

"""
Concrete Field Backends

Three curated fields plus a factory for custom primes:

    oxfoi       Goldilocks, 2^64 - 2^32 + 1     native int
    curve25519  Ed25519 scalar field            gmpy2.mpz
    alt_bn128   BN254 scalar field              py_ecc

Use get_field(name) to look a field up by its short identifier.
"""

from typing import Dict, Type

from ..element import FieldElement
from .alt_bn128 import BN128_SCALAR_ORDER, Bn128FieldElement
from .curve25519 import CURVE25519_ORDER, Curve25519FieldElement
from .custom import custom_field
from .native import NativeFieldElement
from .oxfoi import GOLDILOCKS_PRIME, TWO_ADICITY, OxfoiFieldElement


FIELDS: Dict[str, Type[FieldElement]] = {
    cls.NAME: cls
    for cls in (OxfoiFieldElement, Curve25519FieldElement, Bn128FieldElement)
}


def get_field(name: str) -> Type[FieldElement]:
    """Field class for a short identifier such as "oxfoi"."""
    try:
        return FIELDS[name.strip().lower()]
    except KeyError:
        known = ', '.join(sorted(FIELDS))
        raise ValueError(f"Unknown field {name!r}; known fields: {known}") from None


__all__ = [
    "FIELDS",
    "get_field",
    "custom_field",
    "NativeFieldElement",
    "OxfoiFieldElement",
    "Curve25519FieldElement",
    "Bn128FieldElement",
    "GOLDILOCKS_PRIME",
    "TWO_ADICITY",
    "CURVE25519_ORDER",
    "BN128_SCALAR_ORDER",
]

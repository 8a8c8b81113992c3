"""
Curve25519 Scalar Field

Field: F_l where l = 2^252 + 27742317777372353535851937790883648493,
the prime order of the Ed25519 / Curve25519 base point subgroup.

Powered by GMP through gmpy2: the native representation is a gmpy2.mpz.
mpz values never leave this module; to_int() always hands out a Python
int. Serialized as 32 little-endian bytes, the usual Ed25519 scalar
encoding.
"""

import gmpy2
from gmpy2 import mpz

from ..element import FieldElement


# Group order l (both Ed25519 and Curve25519)
CURVE25519_ORDER = (1 << 252) + 27742317777372353535851937790883648493

_ORDER = mpz(CURVE25519_ORDER)


class Curve25519FieldElement(FieldElement):
    """Element of the Curve25519 scalar field."""

    __slots__ = ()

    NAME = "curve25519"
    MODULUS = CURVE25519_ORDER
    BYTE_LEN = 32

    @classmethod
    def _from_int(cls, value: int) -> mpz:
        return mpz(value)

    def _to_int(self) -> int:
        return int(self._raw)

    def _add(self, other: mpz) -> mpz:
        return gmpy2.f_mod(self._raw + other, _ORDER)

    def _sub(self, other: mpz) -> mpz:
        return gmpy2.f_mod(self._raw - other, _ORDER)

    def _mul(self, other: mpz) -> mpz:
        return gmpy2.f_mod(gmpy2.mul(self._raw, other), _ORDER)

    def _neg(self) -> mpz:
        return gmpy2.f_mod(-self._raw, _ORDER)

"""
alt_bn128 (BN254) Scalar Field

Field: F_r where r is the order of the BN254 G1/G2 groups,
r = 21888242871839275222246405745257275088548364400416034343698204186575808495617

Powered by py_ecc: the native representation is a py_ecc field element
whose field_modulus is the curve order. py_ecc quietly maps 1/0 to 0;
that path is never reached because division and inversion go through
the generic contract, which rejects zero first.
"""

from py_ecc import bn128
from py_ecc.fields import bn128_FQ

from ..element import FieldElement


BN128_SCALAR_ORDER = bn128.curve_order


class Fr(bn128_FQ):
    """py_ecc field type over the bn128 curve order."""
    field_modulus = BN128_SCALAR_ORDER


class Bn128FieldElement(FieldElement):
    """Element of the BN254 scalar field, serialized as 32 bytes."""

    __slots__ = ()

    NAME = "alt_bn128"
    MODULUS = BN128_SCALAR_ORDER
    BYTE_LEN = 32

    @classmethod
    def _from_int(cls, value: int) -> Fr:
        return Fr(value)

    def _to_int(self) -> int:
        return self._raw.n

    def _add(self, other: Fr) -> Fr:
        return self._raw + other

    def _sub(self, other: Fr) -> Fr:
        return self._raw - other

    def _mul(self, other: Fr) -> Fr:
        return self._raw * other

    def _neg(self) -> Fr:
        return -self._raw

"""
Native Integer Fields

Fields whose elements are plain Python ints in [0, p). Python ints are
arbitrary precision, so the same class serves a 64-bit prime and a tiny
test prime alike; reduction is a single % after every operation.
"""

from __future__ import annotations

from ..element import FieldElement


class NativeFieldElement(FieldElement):
    """Base for fields backed by a plain int. Subclasses set NAME, MODULUS, BYTE_LEN."""

    __slots__ = ()

    @classmethod
    def _from_int(cls, value: int) -> int:
        return value

    def _to_int(self) -> int:
        return self._raw

    def _add(self, other: int) -> int:
        return (self._raw + other) % self.MODULUS

    def _sub(self, other: int) -> int:
        return (self._raw - other + self.MODULUS) % self.MODULUS

    def _mul(self, other: int) -> int:
        return (self._raw * other) % self.MODULUS

    def _neg(self) -> int:
        return self.MODULUS - self._raw if self._raw else 0

"""
Goldilocks Prime Field ("oxfoi")

Field: F_p where p = 2^64 - 2^32 + 1

Every element fits in one 64-bit machine word. The multiplicative group
has order p-1 = 2^32 * (2^32 - 1), so square roots need the general
Tonelli-Shanks path (p = 1 mod 4).
"""

from .native import NativeFieldElement


# Goldilocks prime: p = 2^64 - 2^32 + 1
GOLDILOCKS_PRIME = (1 << 64) - (1 << 32) + 1

# Two-adicity: largest k such that 2^k divides p-1
TWO_ADICITY = 32


class OxfoiFieldElement(NativeFieldElement):
    """Element of the Goldilocks prime field, serialized as 8 bytes."""

    __slots__ = ()

    NAME = "oxfoi"
    MODULUS = GOLDILOCKS_PRIME
    BYTE_LEN = 8

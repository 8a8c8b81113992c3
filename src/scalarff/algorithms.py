"""
Generic Field Algorithms

Every algorithm here is written once against the FieldElement contract
(+, -, *, unary -, zero(), one(), to_int(), MODULUS) and therefore works
unchanged for every backend:

- modpow: square-and-multiply, most significant bit first
- inverse: Fermat's little theorem, a^-1 = a^(p-2)
- legendre / is_quadratic_residue: Euler's criterion, a^((p-1)/2)
- sqrt: p = 3 (mod 4) fast path, Tonelli-Shanks otherwise
- sample_uniform: rejection sampling, no modulo bias
- batch_inverse: Montgomery's trick
- hash_to_field: blake3 XOF with a wide reduction

Every supported modulus is prime; the algorithms rely on it.
"""

from __future__ import annotations
import logging
import operator
from functools import lru_cache
from typing import TYPE_CHECKING, List, Optional, Tuple, Type, TypeVar

import blake3

from .entropy import EntropySource, default_entropy
from .errors import DivisionByZero, NotAResidue
from .tags import FieldTag, tag_bytes

if TYPE_CHECKING:
    from .element import FieldElement

F = TypeVar('F', bound='FieldElement')

logger = logging.getLogger(__name__)

# Extra bytes drawn by hash_to_field beyond the field width. The bias of
# reducing a (BYTE_LEN + 16)-byte integer mod p is below 2^-128.
HASH_TO_FIELD_EXTRA_BYTES = 16


# =============================================================================
# Exponentiation and Inversion
# =============================================================================

def modpow(base: F, exponent: int) -> F:
    """
    Exponentiation using square-and-multiply.

    Bits are processed most significant first, starting from one(), so
    base^0 == 1 for every base (including zero) and 0^e == 0 for e > 0.
    """
    exponent = operator.index(exponent)
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")

    result = type(base).one()
    for i in range(exponent.bit_length() - 1, -1, -1):
        result = result * result
        if (exponent >> i) & 1:
            result = result * base
    return result


def inverse(a: F) -> F:
    """
    Multiplicative inverse using Fermat's little theorem.

    a^-1 = a^(p-2) mod p
    """
    if a.is_zero():
        raise DivisionByZero(a.name())
    return modpow(a, a.MODULUS - 2)


def batch_inverse(elements: List[F]) -> List[F]:
    """
    Batch inversion using Montgomery's trick.

    Computes inverses of n elements using 3(n-1) multiplications + 1 inversion.
    Raises DivisionByZero if any element is zero.
    """
    n = len(elements)
    if n == 0:
        return []
    if n == 1:
        return [inverse(elements[0])]

    field = type(elements[0])
    for element in elements:
        if element.is_zero():
            raise DivisionByZero(element.name())

    # Forward pass: compute prefix products
    prefix = [field.one()] * n
    prefix[0] = elements[0]
    for i in range(1, n):
        prefix[i] = prefix[i-1] * elements[i]

    # Single inversion of the total product
    inv_total = inverse(prefix[-1])

    # Backward pass: compute individual inverses
    inverses = [field.zero()] * n
    for i in range(n - 1, 0, -1):
        inverses[i] = inv_total * prefix[i-1]
        inv_total = inv_total * elements[i]
    inverses[0] = inv_total

    return inverses


# =============================================================================
# Quadratic Residues
# =============================================================================

def legendre(a: FieldElement) -> int:
    """
    Legendre symbol (a / p) by Euler's criterion.

    Returns 0 for zero, 1 for a nonzero square, -1 for a non-square.
    """
    if a.is_zero():
        return 0
    p = a.MODULUS
    symbol = modpow(a, (p - 1) // 2)
    if symbol.is_one():
        return 1
    if symbol.to_int() == p - 1:
        return -1
    raise ArithmeticError(
        f"Legendre symbol of {a} in {a.name()} is not 1, -1, or 0: modulus {p} is not prime"
    )


def is_quadratic_residue(a: FieldElement) -> bool:
    """True for squares; zero counts as a (trivial) residue."""
    return legendre(a) != -1


@lru_cache(maxsize=None)
def two_adic_decomposition(p: int) -> Tuple[int, int]:
    """Factor p - 1 = q * 2^s with q odd. Returns (q, s)."""
    q, s = p - 1, 0
    while q and q % 2 == 0:
        q //= 2
        s += 1
    return q, s


@lru_cache(maxsize=None)
def find_non_residue(field: Type[F]) -> F:
    """Smallest quadratic non-residue >= 2, found by trial."""
    candidate = 2
    while candidate < field.MODULUS:
        z = field(candidate)
        if legendre(z) == -1:
            logger.debug("non-residue for %s: %d", field.NAME, candidate)
            return z
        candidate += 1
    raise ArithmeticError(f"Field {field.NAME} has no quadratic non-residue")


def tonelli_shanks(a: F) -> F:
    """
    Tonelli-Shanks square root.

    Maintains r^2 = a * t while the order of t halves each round; stops
    when t = 1. Correct for every odd prime, whatever p is mod 4.
    Raises NotAResidue if a has no root.
    """
    field = type(a)
    if a.is_zero():
        return field.zero()

    q, s = two_adic_decomposition(field.MODULUS)
    z = find_non_residue(field)

    m = s
    c = modpow(z, q)
    t = modpow(a, q)
    r = modpow(a, (q + 1) // 2)

    while not t.is_one():
        # Find least i such that t^(2^i) = 1; a residue always has i < m
        i = 0
        temp = t
        while not temp.is_one():
            temp = temp * temp
            i += 1
            if i >= m:
                raise NotAResidue(field.NAME, a.to_int())

        # Update
        b = modpow(c, 1 << (m - i - 1))
        m = i
        c = b * b
        t = t * c
        r = r * b

    return r


def sqrt(a: F) -> F:
    """
    Square root of a quadratic residue.

    Always returns the smaller of the two roots r, -r, so the result is
    deterministic. Raises NotAResidue for non-residues.
    """
    field = type(a)
    if a.is_zero():
        return field.zero()
    if legendre(a) != 1:
        raise NotAResidue(field.NAME, a.to_int())

    p = field.MODULUS
    if p == 2:
        root = a
    elif p % 4 == 3:
        root = modpow(a, (p + 1) // 4)
    else:
        root = tonelli_shanks(a)
    return smaller_root(root)


def smaller_root(root: F) -> F:
    """Pick the smaller canonical representative of {root, -root}."""
    other = -root
    return root if root.to_int() <= other.to_int() else other


def quadratic_residues_at(field: Type[F], start: int, count: int) -> List[Tuple[F, F, F]]:
    """
    Next `count` nonzero quadratic residues at or after `start`.

    Returns (element, low_root, high_root) triples, low_root < high_root.
    """
    out = []
    x = start
    while len(out) < count:
        element = field(x)
        if legendre(element) == 1:
            low_root = sqrt(element)
            out.append((element, low_root, -low_root))
        x += 1
    return out


# =============================================================================
# Sampling and Hashing
# =============================================================================

def sample_uniform(field: Type[F], entropy: Optional[EntropySource] = None) -> F:
    """
    Uniform element of [0, p) by rejection sampling.

    Draws ceil(log2(p)) bits at a time and retries while the draw is
    >= p; each draw succeeds with probability above 1/2.
    """
    if entropy is None:
        entropy = default_entropy()
    p = field.MODULUS
    bits = (p - 1).bit_length()
    while True:
        candidate = entropy.getrandbits(bits)
        if candidate < p:
            return field(candidate)


def hash_to_field(field: Type[F], data: bytes) -> F:
    """Map arbitrary bytes to a field element (blake3 XOF, wide reduction)."""
    length = field.BYTE_LEN + HASH_TO_FIELD_EXTRA_BYTES
    digest = blake3.blake3(tag_bytes(FieldTag.HASH_TO_FIELD) + bytes(data)).digest(length=length)
    return field(int.from_bytes(digest, 'little'))


# =============================================================================
# Integer Helpers
# =============================================================================

def log_floor(a: FieldElement, base: FieldElement) -> int:
    """
    floor(log_base(a)) on canonical representatives.

    Returns 0 when base > a, zero included. O(log_base(a)) multiplications.
    """
    e = a.to_int()
    b = base.to_int()
    if b < 2:
        raise ValueError(f"Logarithm base must be at least 2, got {b}")
    if b > e:
        return 0
    power = b
    i = 1
    while power * b <= e:
        power *= b
        i += 1
    return i

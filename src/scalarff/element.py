"""
Field Element Contract

FieldElement is the abstract base every concrete field implements. A
backend supplies only six hooks on its own native representation:

    _from_int(value)  -> raw      value already reduced into [0, p)
    _to_int()         -> int      canonical representative
    _add(raw) / _sub(raw) / _mul(raw) / _neg()  -> raw

plus three class constants: NAME, MODULUS and BYTE_LEN.

Everything else (operators, comparison, exponentiation, inversion,
square roots, serialization, random sampling) is defined here once, on
top of those hooks, through the generic algorithms module.

Each field is its own class. Combining elements of two different fields
raises FieldMismatchError; plain ints are coerced into the field.
"""

from __future__ import annotations
import operator
from abc import ABC, abstractmethod
from functools import total_ordering
from typing import Any, ClassVar, Optional, Type, TypeVar, Union

from . import algorithms
from .bridge import bytes_to_int, canonical_int, decimal_to_int, int_to_bytes, to_biguint
from .entropy import EntropySource
from .errors import DeserializationError, FieldMismatchError

F = TypeVar('F', bound='FieldElement')


@total_ordering
class FieldElement(ABC):
    """
    Element of a prime field F_p.

    Immutable: every operation returns a new element. Equality and
    ordering use the canonical representative in [0, p), never the
    backend encoding.
    """

    __slots__ = ('_raw',)

    NAME: ClassVar[str] = "abstract"
    MODULUS: ClassVar[int] = 0
    BYTE_LEN: ClassVar[int] = 0

    def __init__(self, value: Union[int, FieldElement] = 0):
        """Create field element from integer (reduced mod p)."""
        if isinstance(value, FieldElement):
            if type(value) is not type(self):
                raise FieldMismatchError(self.NAME, value.NAME)
            self._raw = value._raw
        else:
            self._raw = self._from_int(canonical_int(type(self), value))

    # =========================================================================
    # Backend Hooks
    # =========================================================================

    @classmethod
    @abstractmethod
    def _from_int(cls, value: int) -> Any:
        """Native representation of an int already in [0, p)."""

    @abstractmethod
    def _to_int(self) -> int:
        """Canonical representative of the native representation."""

    @abstractmethod
    def _add(self, other: Any) -> Any:
        ...

    @abstractmethod
    def _sub(self, other: Any) -> Any:
        ...

    @abstractmethod
    def _mul(self, other: Any) -> Any:
        ...

    @abstractmethod
    def _neg(self) -> Any:
        ...

    @classmethod
    def _wrap(cls: Type[F], raw: Any) -> F:
        obj = cls.__new__(cls)
        obj._raw = raw
        return obj

    def _coerce(self, other: Any):
        if type(other) is type(self):
            return other
        if isinstance(other, FieldElement):
            raise FieldMismatchError(self.NAME, other.NAME)
        try:
            return type(self)(operator.index(other))
        except TypeError:
            return NotImplemented

    # =========================================================================
    # Arithmetic Operations
    # =========================================================================

    def __add__(self: F, other: Union[F, int]) -> F:
        """Addition in F_p."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._wrap(self._add(other._raw))

    __radd__ = __add__

    def __sub__(self: F, other: Union[F, int]) -> F:
        """Subtraction in F_p."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._wrap(self._sub(other._raw))

    def __rsub__(self: F, other: int) -> F:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self: F, other: Union[F, int]) -> F:
        """Multiplication in F_p."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._wrap(self._mul(other._raw))

    __rmul__ = __mul__

    def __neg__(self: F) -> F:
        """Negation in F_p."""
        return self._wrap(self._neg())

    def __pos__(self: F) -> F:
        return self

    def __truediv__(self: F, other: Union[F, int]) -> F:
        """Division in F_p (multiplication by inverse)."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self: F, other: int) -> F:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other / self

    def __pow__(self: F, exponent: int) -> F:
        """Exponentiation using square-and-multiply."""
        exponent = operator.index(exponent)
        if exponent < 0:
            return self.inverse() ** (-exponent)
        return algorithms.modpow(self, exponent)

    def pow(self: F, exponent: int) -> F:
        return self ** exponent

    def inverse(self: F) -> F:
        """
        Multiplicative inverse using Fermat's little theorem.

        a^-1 = a^(p-2) mod p. Raises DivisionByZero for zero.
        """
        return algorithms.inverse(self)

    def legendre(self) -> int:
        """Legendre symbol: 1 residue, -1 non-residue, 0 for zero."""
        return algorithms.legendre(self)

    def is_residue(self) -> bool:
        return algorithms.is_quadratic_residue(self)

    def sqrt(self: F) -> F:
        """
        Smaller square root. Raises NotAResidue if none exists.
        """
        return algorithms.sqrt(self)

    def log_floor(self, base: Union[FieldElement, int]) -> int:
        """floor(log_base(self)) on canonical representatives."""
        coerced = self._coerce(base)
        if coerced is NotImplemented:
            raise TypeError(f"Unsupported logarithm base: {base!r}")
        return algorithms.log_floor(self, coerced)

    # =========================================================================
    # Comparison Operations
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldElement):
            return type(other) is type(self) and self.to_int() == other.to_int()
        try:
            # Only the canonical int is equal, so hash(F(n)) == hash(n)
            return self.to_int() == operator.index(other)
        except TypeError:
            return NotImplemented

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            if isinstance(other, FieldElement):
                raise FieldMismatchError(self.NAME, other.NAME)
            return NotImplemented
        return self.to_int() < other.to_int()

    def __hash__(self) -> int:
        return hash(self.to_int())

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        return self.to_int()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_int()})"

    def __str__(self) -> str:
        return str(self.to_int())

    # =========================================================================
    # Canonical Integer
    # =========================================================================

    def to_int(self) -> int:
        """Canonical representative in [0, p)."""
        return to_biguint(self)

    to_biguint = to_int
    to_integer = to_int

    @classmethod
    def from_int(cls: Type[F], value: int) -> F:
        """Element for any integer (reduced mod p)."""
        return cls(value)

    from_biguint = from_int
    from_integer = from_int

    # =========================================================================
    # Serialization
    # =========================================================================

    def serialize(self) -> bytes:
        """Serialize to BYTE_LEN bytes (little-endian)."""
        return int_to_bytes(self.to_int(), self.BYTE_LEN)

    @classmethod
    def deserialize(cls: Type[F], data: bytes) -> F:
        """
        Strict inverse of serialize().

        Raises DeserializationError unless data is exactly BYTE_LEN bytes
        encoding a value below the modulus.
        """
        data = bytes(data)
        if len(data) != cls.BYTE_LEN:
            raise DeserializationError(
                f"{cls.NAME} element must be {cls.BYTE_LEN} bytes, got {len(data)}"
            )
        value = bytes_to_int(data)
        if value >= cls.MODULUS:
            raise DeserializationError(f"{value} is not below the {cls.NAME} modulus")
        return cls._wrap(cls._from_int(value))

    def to_bytes_le(self) -> bytes:
        """Minimal little-endian encoding (at least one byte)."""
        value = self.to_int()
        return int_to_bytes(value, max(1, (value.bit_length() + 7) // 8))

    @classmethod
    def from_bytes_le(cls: Type[F], data: bytes) -> F:
        """
        Lenient decoding: up to BYTE_LEN bytes, reduced mod p.

        Raises DeserializationError only for input longer than BYTE_LEN.
        """
        data = bytes(data)
        if len(data) > cls.BYTE_LEN:
            raise DeserializationError(
                f"{cls.NAME} element takes at most {cls.BYTE_LEN} bytes, got {len(data)}"
            )
        return cls(bytes_to_int(data))

    @classmethod
    def from_str(cls: Type[F], text: str) -> F:
        """Parse a decimal string (reduced mod p)."""
        text = text.strip()
        if not (text.isascii() and text.isdigit()):
            raise DeserializationError(f"Not a decimal {cls.NAME} element: {text!r}")
        return cls._wrap(cls._from_int(decimal_to_int(text, cls.MODULUS)))

    def lower60_string(self) -> str:
        """
        Lossy display using only the lower 60 bits.

        The plain decimal string is returned when it is not meaningfully
        longer than the lower-60-bit form.
        """
        plain = str(self)
        l60 = f"{self.to_int() % (1 << 60)}_L60"
        if len(l60) + 3 < len(plain):
            return l60
        return plain

    # =========================================================================
    # Predicates
    # =========================================================================

    def is_zero(self) -> bool:
        return self.to_int() == 0

    def is_one(self) -> bool:
        return self.to_int() == 1

    # =========================================================================
    # Class Methods
    # =========================================================================

    @classmethod
    def zero(cls: Type[F]) -> F:
        """Additive identity."""
        return cls(0)

    @classmethod
    def one(cls: Type[F]) -> F:
        """Multiplicative identity."""
        return cls(1)

    @classmethod
    def modulus(cls) -> int:
        """The prime p."""
        return cls.MODULUS

    @classmethod
    def name(cls) -> str:
        """Short identifier for the field."""
        return cls.NAME

    @classmethod
    def random(cls: Type[F], entropy: Optional[EntropySource] = None) -> F:
        """Uniform random element; OS CSPRNG unless `entropy` is given."""
        return algorithms.sample_uniform(cls, entropy)

    @classmethod
    def hash_to_field(cls: Type[F], data: bytes) -> F:
        """Create field element from arbitrary bytes (blake3, reduced mod p)."""
        return algorithms.hash_to_field(cls, data)

"""
Entropy Providers

Random sampling draws bits through a small interface: any object with a
``getrandbits(k)`` method. ``random.Random`` and ``secrets.SystemRandom``
already satisfy it, so tests can pass a seeded ``random.Random`` and
production code gets the operating system CSPRNG by default.

Blake3Entropy is a deterministic, seedable stream built on the blake3
XOF, for reproducible sampling that is still cryptographically derived.
"""

from __future__ import annotations
import secrets
from typing import Protocol, Union, runtime_checkable

import blake3

from .tags import FieldTag, tag_bytes


@runtime_checkable
class EntropySource(Protocol):
    """Anything that can produce k uniformly random bits."""

    def getrandbits(self, k: int) -> int:
        ...


class SystemEntropy(secrets.SystemRandom):
    """Operating system CSPRNG (os.urandom)."""


class Blake3Entropy:
    """
    Deterministic entropy stream: blake3 XOF keyed by a seed.

    Two instances built from the same seed yield the same bit stream.
    The stream is read sequentially; every read advances the offset.
    """

    __slots__ = ('_hasher', '_offset')

    def __init__(self, seed: Union[bytes, str]):
        if isinstance(seed, str):
            seed = seed.encode('utf-8')
        self._hasher = blake3.blake3(tag_bytes(FieldTag.ENTROPY_STREAM) + bytes(seed))
        self._offset = 0

    def read(self, length: int) -> bytes:
        """Next `length` bytes of the stream."""
        if length < 0:
            raise ValueError(f"Length must be non-negative, got {length}")
        out = self._hasher.digest(length=length, seek=self._offset)
        self._offset += length
        return out

    def getrandbits(self, k: int) -> int:
        """Next k bits of the stream as a non-negative integer."""
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        if k == 0:
            return 0
        nbytes = (k + 7) // 8
        value = int.from_bytes(self.read(nbytes), 'little')
        return value >> (nbytes * 8 - k)

    @property
    def offset(self) -> int:
        """Number of bytes consumed so far."""
        return self._offset


def default_entropy() -> EntropySource:
    """The entropy source used when a caller does not inject one."""
    return SystemEntropy()

"""
Domain Tags for blake3 Derivations

Every blake3 input starts with one of these tags so that an entropy
stream and a hash-to-field call can never produce the same output for
the same bytes. These tags are PINNED - changing them changes every
derived value.
"""

from enum import IntEnum


class FieldTag(IntEnum):
    """Domain separation tags."""

    ENTROPY_STREAM = 0x10   # Seeded deterministic entropy stream
    HASH_TO_FIELD = 0x20    # Wide reduction of arbitrary bytes


def tag_bytes(tag: FieldTag) -> bytes:
    """Convert tag to canonical bytes (2 bytes, big-endian)."""
    return tag.to_bytes(2, 'big')

"""
Residue Search Parameters

ResidueSearchParams holds every knob of the residue search
demonstration. Instances are immutable; derive variants with
dataclasses.replace().
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class SearchDirection(Enum):
    """Order in which candidate integers are scanned."""
    UP = 'up'
    DOWN = 'down'


@dataclass(frozen=True)
class ResidueSearchParams:
    """
    Parameters for scanning a field for quadratic residues.

    All parameters are immutable and hashable.
    """

    start: int = 360
    """First candidate integer."""

    count: int = 10
    """Number of residues to report."""

    direction: Union[SearchDirection, str] = SearchDirection.UP
    """UP scans start, start+1, ...; DOWN scans start, start-1, ..., 1."""

    workers: int = 1
    """Worker threads. 1 scans sequentially."""

    chunk_size: int = 64
    """Candidates handed to one worker at a time."""

    def __post_init__(self):
        # Accept plain strings from the command line
        object.__setattr__(self, 'direction', SearchDirection(self.direction))
        if self.start < 0:
            raise ValueError(f"start must be non-negative, got {self.start}")
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be at least 1, got {self.chunk_size}")


# =============================================================================
# Preset Configurations
# =============================================================================

# Quick: 10 residues, the usual demonstration
PARAMS_QUICK = ResidueSearchParams(count=10)

# Demo: 1000 residues per field
PARAMS_DEMO = ResidueSearchParams(count=1000)

"""
Residue Search

Scans candidate integers k in a field and reports each nonzero quadratic
residue with a two-factor witness of its negation:

    -k = r * (-r)        where r = sqrt(k), the smaller root

Candidates are scanned upward from `start` (or downward to 1). With more
than one worker the scan is split into chunks; every worker builds its
own elements, results are concatenated and put back into scan order.
"""

from __future__ import annotations
import itertools
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Type

from .element import FieldElement
from .params import PARAMS_QUICK, ResidueSearchParams, SearchDirection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResidueWitness:
    """A quadratic residue and its factor pair."""
    candidate: int
    element: FieldElement
    root: FieldElement
    cofactor: FieldElement

    @property
    def negated(self) -> FieldElement:
        """-element, the value the factor pair multiplies to."""
        return -self.element

    def verify(self) -> bool:
        """Both roots square to element and their product is -element."""
        return (
            self.root * self.root == self.element
            and self.cofactor * self.cofactor == self.element
            and self.root * self.cofactor == self.negated
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'field': self.element.name(),
            'candidate': self.candidate,
            'element': self.element.to_int(),
            'root': self.root.to_int(),
            'cofactor': self.cofactor.to_int(),
        }


def witness_for(field: Type[FieldElement], candidate: int) -> Optional[ResidueWitness]:
    """Witness for `candidate` if it is a nonzero residue, else None."""
    element = field(candidate)
    if element.legendre() != 1:
        return None
    root = element.sqrt()
    return ResidueWitness(candidate, element, root, -root)


def _candidates(params: ResidueSearchParams) -> Iterator[int]:
    if params.direction is SearchDirection.UP:
        return itertools.count(params.start)
    return iter(range(params.start, 0, -1))


def _scan_chunk(field: Type[FieldElement], chunk: List[int]) -> List[ResidueWitness]:
    found = []
    for candidate in chunk:
        witness = witness_for(field, candidate)
        if witness is not None:
            found.append(witness)
    return found


def find_residues(
    field: Type[FieldElement],
    params: ResidueSearchParams = PARAMS_QUICK,
) -> List[ResidueWitness]:
    """
    First `params.count` residues of `field` in scan order.

    A downward scan that reaches 1 first returns fewer results.
    """
    logger.info(
        "finding the next %d residues in field %s: starting at %d (%s)",
        params.count, field.name(), params.start, params.direction.value,
    )
    candidates = _candidates(params)

    if params.workers == 1:
        found = []
        for candidate in candidates:
            if len(found) >= params.count:
                break
            witness = witness_for(field, candidate)
            if witness is not None:
                found.append(witness)
    else:
        found = _find_parallel(field, params, candidates)

    if len(found) < params.count:
        logger.warning(
            "only %d of %d residues found in %s before the scan ended",
            len(found), params.count, field.name(),
        )
    return found


def _find_parallel(
    field: Type[FieldElement],
    params: ResidueSearchParams,
    candidates: Iterator[int],
) -> List[ResidueWitness]:
    descending = params.direction is SearchDirection.DOWN
    found: List[ResidueWitness] = []

    with ThreadPoolExecutor(max_workers=params.workers) as executor:
        while len(found) < params.count:
            chunks = []
            for _ in range(params.workers):
                chunk = list(itertools.islice(candidates, params.chunk_size))
                if chunk:
                    chunks.append(chunk)
            if not chunks:
                break
            for result in executor.map(lambda chunk: _scan_chunk(field, chunk), chunks):
                found.extend(result)

    found.sort(key=lambda w: w.candidate, reverse=descending)
    return found[:params.count]


def format_witness(witness: ResidueWitness) -> str:
    """One report line: -k_field = r * c (lower 60 bits for long values)."""
    return "    -{}_{} = {} * {}".format(
        witness.element.lower60_string(),
        witness.element.name(),
        witness.root.lower60_string(),
        witness.cofactor.lower60_string(),
    )

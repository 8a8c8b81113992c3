"""
scalarff-residues: quadratic residue search demonstration

For each selected field, finds the next N quadratic residues starting
at an integer and prints each one with its factor pair, then a timing
summary.

Usage:
    scalarff-residues                               # 10 residues in every field from 360
    scalarff-residues --field oxfoi --count 1000
    scalarff-residues --field alt_bn128 --field curve25519 --start 1000 --direction down
"""

from __future__ import annotations
import argparse
import dataclasses
import logging
from typing import List, Optional, Sequence

from .errors import FieldError
from .fields import FIELDS, get_field
from .params import PARAMS_QUICK, SearchDirection
from .residues import find_residues, format_witness
from .timing import TimingTranscript

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='scalarff-residues',
        description='Find quadratic residues and their factor pairs in scalar fields',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    scalarff-residues                          # All fields, 10 residues from 360
    scalarff-residues --field oxfoi -n 1000    # 1000 residues in Goldilocks
        """
    )

    parser.add_argument(
        '--field', '-f',
        action='append',
        choices=sorted(FIELDS) + ['all'],
        help='Field to search (repeatable, default: all)'
    )

    parser.add_argument(
        '--start', '-s',
        type=int,
        default=PARAMS_QUICK.start,
        help=f'First candidate integer (default: {PARAMS_QUICK.start})'
    )

    parser.add_argument(
        '--count', '-n',
        type=int,
        default=PARAMS_QUICK.count,
        help=f'Residues to find per field (default: {PARAMS_QUICK.count})'
    )

    parser.add_argument(
        '--direction', '-d',
        choices=[d.value for d in SearchDirection],
        default=SearchDirection.UP.value,
        help='Scan direction (default: up)'
    )

    parser.add_argument(
        '--workers', '-w',
        type=int,
        default=PARAMS_QUICK.workers,
        help='Worker threads (default: 1)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Debug logging'
    )

    return parser


def _selected_fields(names: Optional[List[str]]) -> List[str]:
    if not names or 'all' in names:
        return list(FIELDS)
    # Keep the first occurrence of each name
    return list(dict.fromkeys(names))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )

    try:
        params = dataclasses.replace(
            PARAMS_QUICK,
            start=args.start,
            count=args.count,
            direction=args.direction,
            workers=args.workers,
        )
    except ValueError as e:
        parser.error(str(e))

    transcript = TimingTranscript()

    for name in _selected_fields(args.field):
        field = get_field(name)
        print(f"finding the next {params.count} residues in field {field.name()}: "
              f"starting at {params.start}")

        def run(field=field):
            for witness in find_residues(field, params):
                print(format_witness(witness))

        try:
            transcript.stat_exec(f"{params.count} quadratic residues in {field.name()}", run)
        except FieldError as e:
            logger.error("residue search in %s failed: %s", field.name(), e)
            print(f"  ✗ {field.name()}: {e}")

    transcript.summary()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())

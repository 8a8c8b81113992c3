"""
scalarff: scalar finite fields behind one interface

A minimal, opinionated library for working with scalar finite fields.
Curated field implementations from established libraries share a single
FieldElement contract, and the generic algorithms (exponentiation,
inversion, Legendre symbol, Tonelli-Shanks square roots, uniform
sampling) are written once against it.

No guarantees are made about the timing of field operations beyond what
each backend provides. This library should be considered vulnerable to
timing attacks.

Usage:
    from scalarff import OxfoiFieldElement as F

    x = F(19)
    assert x * x == F(361)
    r = F(361).sqrt()          # smaller root: 19
    inv = x.inverse()          # DivisionByZero for F(0)

    # Any prime works for experiments
    from scalarff import custom_field
    F13 = custom_field("f13", 13)
"""

import logging

# Errors
from .errors import (
    FieldError,
    DivisionByZero,
    NotAResidue,
    DeserializationError,
    FieldMismatchError,
)

# Contract
from .element import FieldElement

# Canonical integer bridge
from .bridge import to_biguint, from_biguint, same_integer

# Generic algorithms
from .algorithms import (
    modpow,
    inverse,
    batch_inverse,
    legendre,
    is_quadratic_residue,
    sqrt,
    tonelli_shanks,
    sample_uniform,
    hash_to_field,
    quadratic_residues_at,
)

# Entropy
from .entropy import EntropySource, SystemEntropy, Blake3Entropy

# Fields
from .fields import (
    FIELDS,
    get_field,
    custom_field,
    OxfoiFieldElement,
    Curve25519FieldElement,
    Bn128FieldElement,
    GOLDILOCKS_PRIME,
    CURVE25519_ORDER,
    BN128_SCALAR_ORDER,
)

# Residue search
from .params import ResidueSearchParams, SearchDirection, PARAMS_QUICK, PARAMS_DEMO
from .residues import ResidueWitness, find_residues

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.4.3"

__all__ = [
    # Version
    "__version__",
    # Errors
    "FieldError",
    "DivisionByZero",
    "NotAResidue",
    "DeserializationError",
    "FieldMismatchError",
    # Contract
    "FieldElement",
    # Bridge
    "to_biguint",
    "from_biguint",
    "same_integer",
    # Algorithms
    "modpow",
    "inverse",
    "batch_inverse",
    "legendre",
    "is_quadratic_residue",
    "sqrt",
    "tonelli_shanks",
    "sample_uniform",
    "hash_to_field",
    "quadratic_residues_at",
    # Entropy
    "EntropySource",
    "SystemEntropy",
    "Blake3Entropy",
    # Fields
    "FIELDS",
    "get_field",
    "custom_field",
    "OxfoiFieldElement",
    "Curve25519FieldElement",
    "Bn128FieldElement",
    "GOLDILOCKS_PRIME",
    "CURVE25519_ORDER",
    "BN128_SCALAR_ORDER",
    # Residue search
    "ResidueSearchParams",
    "SearchDirection",
    "PARAMS_QUICK",
    "PARAMS_DEMO",
    "ResidueWitness",
    "find_residues",
]

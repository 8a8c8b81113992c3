"""
Property-Based Testing with Hypothesis

The field axioms and contract guarantees must hold for every element of
every backend, not just hand-picked values.
"""

import pytest
from hypothesis import given, strategies as st, settings, assume

from scalarff import (
    OxfoiFieldElement,
    Curve25519FieldElement,
    Bn128FieldElement,
    NotAResidue,
    custom_field,
)

FIELDS = [OxfoiFieldElement, Curve25519FieldElement, Bn128FieldElement]

F97 = custom_field("f97", 97)


def wide_integers(field):
    """Integers well outside [0, p) as well as inside it."""
    p = field.MODULUS
    return st.integers(min_value=-4 * p, max_value=4 * p)


# =============================================================================
# PROPERTY: CANONICAL REPRESENTATIVES
# =============================================================================

class TestCanonical:
    """Every element's representative lies in [0, p)."""

    @pytest.mark.parametrize("field", FIELDS, ids=lambda f: f.NAME)
    @given(data=st.data())
    @settings(max_examples=100, deadline=None)
    def test_range(self, field, data):
        a = field(data.draw(wide_integers(field)))
        b = field(data.draw(wide_integers(field)))
        for x in (a, b, a + b, a - b, a * b, -a):
            assert 0 <= x.to_int() < field.MODULUS

    @pytest.mark.parametrize("field", FIELDS, ids=lambda f: f.NAME)
    @given(data=st.data())
    @settings(max_examples=100, deadline=None)
    def test_matches_integer_arithmetic(self, field, data):
        p = field.MODULUS
        x = data.draw(wide_integers(field))
        y = data.draw(wide_integers(field))
        assert (field(x) + field(y)).to_int() == (x + y) % p
        assert (field(x) - field(y)).to_int() == (x - y) % p
        assert (field(x) * field(y)).to_int() == (x * y) % p


# =============================================================================
# PROPERTY: FIELD LAWS
# =============================================================================

class TestFieldLaws:
    """Inverses and exponent laws."""

    @pytest.mark.parametrize("field", FIELDS, ids=lambda f: f.NAME)
    @given(data=st.data())
    @settings(max_examples=50, deadline=None)
    def test_add_then_sub(self, field, data):
        a = field(data.draw(wide_integers(field)))
        b = field(data.draw(wide_integers(field)))
        assert (a + b) - b == a

    @pytest.mark.parametrize("field", FIELDS, ids=lambda f: f.NAME)
    @given(data=st.data())
    @settings(max_examples=30, deadline=None)
    def test_mul_then_inverse(self, field, data):
        a = field(data.draw(wide_integers(field)))
        b = field(data.draw(wide_integers(field)))
        assume(not b.is_zero())
        assert (a * b) * b.inverse() == a
        assert b * b.inverse() == field.one()

    @pytest.mark.parametrize("field", FIELDS, ids=lambda f: f.NAME)
    @given(data=st.data())
    @settings(max_examples=30, deadline=None)
    def test_exponent_laws(self, field, data):
        a = field(data.draw(wide_integers(field)))
        k = data.draw(st.integers(min_value=0, max_value=2**70))
        m = data.draw(st.integers(min_value=0, max_value=2**70))
        assert a ** 0 == field.one()
        assert a ** 1 == a
        assert a ** k * a ** m == a ** (k + m)
        assert (a ** k).to_int() == pow(a.to_int(), k, field.MODULUS)


# =============================================================================
# PROPERTY: SERIALIZATION
# =============================================================================

class TestSerialization:
    """Encodings round-trip exactly."""

    @pytest.mark.parametrize("field", FIELDS, ids=lambda f: f.NAME)
    @given(data=st.data())
    @settings(max_examples=100, deadline=None)
    def test_bytes_round_trip(self, field, data):
        a = field(data.draw(wide_integers(field)))
        assert field.deserialize(a.serialize()) == a
        assert field.from_bytes_le(a.to_bytes_le()) == a

    @pytest.mark.parametrize("field", FIELDS, ids=lambda f: f.NAME)
    @given(data=st.data())
    @settings(max_examples=100, deadline=None)
    def test_str_round_trip(self, field, data):
        a = field(data.draw(wide_integers(field)))
        assert field.from_str(str(a)) == a


# =============================================================================
# PROPERTY: SQUARE ROOTS
# =============================================================================

class TestSquareRoots:
    """sqrt(r*r) always succeeds and squares back."""

    @pytest.mark.parametrize("field", FIELDS, ids=lambda f: f.NAME)
    @given(data=st.data())
    @settings(max_examples=15, deadline=None)
    def test_square_of_anything(self, field, data):
        x = field(data.draw(wide_integers(field)))
        square = x * x
        root = square.sqrt()
        assert root * root == square
        assert root in (x, -x)

    @given(x=st.integers(min_value=1, max_value=96))
    @settings(max_examples=96)
    def test_small_field_residue_or_error(self, x):
        is_square = any(y * y % 97 == x for y in range(1, 97))
        if is_square:
            root = F97(x).sqrt()
            assert root * root == F97(x)
        else:
            with pytest.raises(NotAResidue):
                F97(x).sqrt()

"""
Tests for the FieldElement contract

Every concrete field must behave identically through the contract:
- construction reduces any integer mod p
- arithmetic is total and canonical
- inverse(0) raises DivisionByZero
- serialization round-trips and rejects malformed input
- elements of different fields never mix
"""

import pytest

from scalarff import (
    FieldElement,
    OxfoiFieldElement,
    Curve25519FieldElement,
    Bn128FieldElement,
    GOLDILOCKS_PRIME,
    CURVE25519_ORDER,
    BN128_SCALAR_ORDER,
    DivisionByZero,
    DeserializationError,
    FieldMismatchError,
    NotAResidue,
    custom_field,
    get_field,
    FIELDS,
)

F13 = custom_field("f13", 13)

ALL_FIELDS = [OxfoiFieldElement, Curve25519FieldElement, Bn128FieldElement, F13]


@pytest.fixture(params=ALL_FIELDS, ids=lambda f: f.NAME)
def field(request):
    return request.param


# =============================================================================
# CONSTANTS
# =============================================================================

class TestConstants:
    """Field moduli and names."""

    def test_goldilocks_prime(self):
        assert GOLDILOCKS_PRIME == 18446744069414584321
        assert OxfoiFieldElement.modulus() == 2**64 - 2**32 + 1

    def test_curve25519_order(self):
        assert CURVE25519_ORDER == 2**252 + 27742317777372353535851937790883648493
        assert Curve25519FieldElement.modulus() == CURVE25519_ORDER

    def test_bn128_order(self):
        assert BN128_SCALAR_ORDER == (
            21888242871839275222246405745257275088548364400416034343698204186575808495617
        )
        assert Bn128FieldElement.modulus() == BN128_SCALAR_ORDER

    def test_names(self):
        assert OxfoiFieldElement.name() == "oxfoi"
        assert Curve25519FieldElement.name() == "curve25519"
        assert Bn128FieldElement.name() == "alt_bn128"
        assert F13.name() == "f13"

    def test_registry(self):
        assert set(FIELDS) == {"oxfoi", "curve25519", "alt_bn128"}
        assert get_field("oxfoi") is OxfoiFieldElement
        assert get_field(" ALT_BN128 ") is Bn128FieldElement

    def test_registry_unknown(self):
        with pytest.raises(ValueError, match="known fields"):
            get_field("secp256k1")

    def test_modulus_minus_one_is_negative_one(self, field):
        """p - 1 is reported as a positive representative, never as -1."""
        neg_one = -field.one()
        assert neg_one.to_int() == field.MODULUS - 1
        assert neg_one.to_int() + 1 == field.modulus()


# =============================================================================
# CONSTRUCTION
# =============================================================================

class TestConstruction:
    """Construction always reduces mod p and never fails for integers."""

    def test_zero_and_one_stable(self, field):
        assert field.zero() == field.zero()
        assert field.one() == field.one()
        assert field.zero().to_int() == 0
        assert field.one().to_int() == 1
        assert field() == field.zero()

    def test_modulus_reduces_to_zero(self, field):
        assert field(field.MODULUS).is_zero()
        assert field(field.MODULUS + 1).is_one()

    def test_wide_integers_reduced(self, field):
        p = field.MODULUS
        big = 7 * p * p + 12345
        assert field(big).to_int() == 12345 % p

    def test_negative_integers_reduced(self, field):
        p = field.MODULUS
        assert field(-1).to_int() == p - 1
        assert field(-p).is_zero()

    def test_from_int_alias(self, field):
        assert field.from_int(42) == field(42)
        assert field.from_biguint(42) == field(42)
        assert field.from_integer(42).to_integer() == 42 % field.MODULUS

    def test_copy_constructor(self, field):
        x = field(99)
        assert field(x) == x

    def test_cross_field_constructor_rejected(self):
        with pytest.raises(FieldMismatchError):
            OxfoiFieldElement(Bn128FieldElement(1))

    def test_float_rejected(self, field):
        with pytest.raises(TypeError):
            field(1.5)

    def test_canonical_range(self, field):
        for value in [0, 1, 2, field.MODULUS - 1, field.MODULUS, 2**300, -(2**300)]:
            assert 0 <= field(value).to_int() < field.MODULUS


# =============================================================================
# ARITHMETIC
# =============================================================================

class TestArithmetic:
    """Operators match integer arithmetic mod p."""

    def test_add_sub_mul(self, field):
        p = field.MODULUS
        a, b = p - 3, 11
        assert (field(a) + field(b)).to_int() == (a + b) % p
        assert (field(b) - field(a)).to_int() == (b - a) % p
        assert (field(a) * field(b)).to_int() == (a * b) % p

    def test_negation(self, field):
        assert (-field.zero()).is_zero()
        assert (-field(5)).to_int() == field.MODULUS - 5
        assert -(-field(5)) == field(5)

    def test_int_operands(self, field):
        x = field(10)
        assert x + 1 == field(11)
        assert 1 + x == field(11)
        assert x - 1 == field(9)
        assert 1 - x == field(-9)
        assert 3 * x == field(30)
        assert x * 3 == field(30)

    def test_add_sub_inverse(self, field):
        a, b = field(123456789), field(-987654321)
        assert (a + b) - b == a

    def test_division(self, field):
        a, b = field(1234), field(5678)
        assert (a / b) * b == a
        assert (1 / b) == b.inverse()

    def test_division_by_zero(self, field):
        with pytest.raises(DivisionByZero):
            field(1) / field(0)

    def test_mismatched_fields_rejected(self):
        with pytest.raises(FieldMismatchError):
            OxfoiFieldElement(1) + Bn128FieldElement(1)
        with pytest.raises(TypeError):
            Curve25519FieldElement(1) * OxfoiFieldElement(1)

    def test_unsupported_operand(self, field):
        with pytest.raises(TypeError):
            field(1) + "1"

    def test_immutability(self, field):
        a = field(7)
        b = a + field(1)
        assert a == field(7)
        assert b == field(8)

    def test_small_field_table(self):
        x = F13(7)
        assert x * x == F13(10)
        for i in range(13):
            e = F13(i)
            assert e * e == F13((i * i) % 13)
            assert e + e == F13((i + i) % 13)


# =============================================================================
# EXPONENTIATION AND INVERSION
# =============================================================================

class TestPowInverse:
    """pow and inverse through the contract."""

    def test_pow_zero_is_one(self, field):
        assert field(0) ** 0 == field.one()
        assert field(12345) ** 0 == field.one()
        assert field(0).pow(0) == field.one()

    def test_pow_one_is_identity(self, field):
        assert field(12345) ** 1 == field(12345)

    def test_zero_base(self, field):
        assert (field(0) ** 5).is_zero()

    def test_pow_matches_builtin(self, field):
        p = field.MODULUS
        assert (field(3) ** 100).to_int() == pow(3, 100, p)
        assert (field(7) ** (p - 1)).is_one()

    def test_pow_adds_exponents(self, field):
        a = field(987654321)
        assert a ** 17 * a ** 29 == a ** 46

    def test_negative_exponent(self, field):
        a = field(5)
        assert a ** -1 == a.inverse()
        assert a ** -3 * a ** 3 == field.one()

    def test_inverse(self, field):
        for value in [1, 2, 3, 19, field.MODULUS - 1]:
            a = field(value)
            assert a * a.inverse() == field.one()

    def test_inverse_of_zero(self, field):
        with pytest.raises(DivisionByZero):
            field(0).inverse()

    def test_inverse_of_zero_is_zero_division_error(self, field):
        with pytest.raises(ZeroDivisionError):
            field.zero().inverse()


# =============================================================================
# COMPARISON
# =============================================================================

class TestComparison:
    """Equality and ordering use canonical representatives."""

    def test_equal_to_int(self, field):
        assert field(5) == 5
        assert field(5) != 6
        assert field(-1) == field.MODULUS - 1

    def test_equal_only_to_canonical_int(self, field):
        p = field.MODULUS
        assert field(5) != 5 + p
        assert field(-1) != -1

    def test_hash_consistent_with_int_equality(self, field):
        p = field.MODULUS
        for value in [0, 5, p - 1]:
            assert field(value) == value
            assert hash(field(value)) == hash(value)
        lookup = {5: "five", p - 1: "minus one"}
        assert lookup[field(5)] == "five"
        assert lookup[field(-1)] == "minus one"
        assert field(5) not in {5 + p}

    def test_different_fields_never_equal(self):
        assert OxfoiFieldElement(5) != Bn128FieldElement(5)
        assert Curve25519FieldElement(0) != OxfoiFieldElement(0)

    def test_ordering(self, field):
        assert field(2) < field(3)
        assert field(-1) > field(1)
        assert sorted([field(3), field(1), field(2)]) == [field(1), field(2), field(3)]

    def test_ordering_across_fields_rejected(self):
        with pytest.raises(FieldMismatchError):
            OxfoiFieldElement(1) < Bn128FieldElement(2)

    def test_hash(self, field):
        assert hash(field(5)) == hash(field(5 + field.MODULUS))
        assert len({field(1), field(1), field(2)}) == 2

    def test_bool(self, field):
        assert not field(0)
        assert field(1)

    def test_int_and_str(self, field):
        assert int(field(-1)) == field.MODULUS - 1
        assert str(field(10)) == "10"
        assert repr(field(10)) == f"{field.__name__}(10)"


# =============================================================================
# SERIALIZATION
# =============================================================================

class TestSerialization:
    """Byte and string encodings."""

    def test_fixed_width(self):
        assert OxfoiFieldElement.BYTE_LEN == 8
        assert Curve25519FieldElement.BYTE_LEN == 32
        assert Bn128FieldElement.BYTE_LEN == 32
        assert F13.BYTE_LEN == 1

    def test_little_endian(self):
        assert OxfoiFieldElement(1).serialize() == b'\x01' + bytes(7)
        assert Curve25519FieldElement(0x0102).serialize() == b'\x02\x01' + bytes(30)

    def test_round_trip(self, field):
        for value in [0, 1, 2, 255, 256, field.MODULUS - 1]:
            a = field(value)
            data = a.serialize()
            assert len(data) == field.BYTE_LEN
            assert field.deserialize(data) == a

    def test_deserialize_wrong_length(self, field):
        with pytest.raises(DeserializationError):
            field.deserialize(bytes(field.BYTE_LEN + 1))
        with pytest.raises(DeserializationError):
            field.deserialize(bytes(field.BYTE_LEN - 1))

    def test_deserialize_rejects_modulus(self, field):
        data = field.MODULUS.to_bytes(field.BYTE_LEN, 'little')
        with pytest.raises(DeserializationError):
            field.deserialize(data)

    def test_deserialization_error_is_value_error(self, field):
        with pytest.raises(ValueError):
            field.deserialize(b'')

    def test_bytes_le_lenient(self, field):
        assert field.from_bytes_le(b'\x05') == field(5)
        assert field.from_bytes_le(b'') == field(0)
        assert field(0).to_bytes_le() == b'\x00'
        if field.MODULUS > 0x0102:
            assert field(0x0102).to_bytes_le() == b"\x02\x01"
        big = field(-1)
        assert field.from_bytes_le(big.to_bytes_le()) == big

    def test_bytes_le_reduces(self, field):
        data = field.MODULUS.to_bytes(field.BYTE_LEN, 'little')
        assert field.from_bytes_le(data).is_zero()

    def test_bytes_le_too_long(self, field):
        with pytest.raises(DeserializationError):
            field.from_bytes_le(bytes(field.BYTE_LEN + 1))

    def test_from_str(self, field):
        assert field.from_str("12345") == field(12345)
        assert field.from_str(" 7 ") == field(7)
        assert field.from_str(str(field(-1))) == field(-1)

    def test_from_str_long_decimal(self, field):
        p = field.MODULUS
        text = "1" * 5000
        expected = sum(pow(10, i, p) for i in range(5000)) % p
        assert field.from_str(text).to_int() == expected
        assert field.from_str(str(p) * 300).to_int() == 0

    def test_from_str_malformed(self, field):
        for text in ["", "abc", "-1", "1.5", "0x10"]:
            with pytest.raises(DeserializationError):
                field.from_str(text)

    def test_lower60_string(self):
        # 0xfoi elements always print as plain decimal
        assert OxfoiFieldElement(-1).lower60_string() == str(GOLDILOCKS_PRIME - 1)
        big = Bn128FieldElement(-1)
        assert big.lower60_string() == f"{(BN128_SCALAR_ORDER - 1) % 2**60}_L60"
        assert Bn128FieldElement(360).lower60_string() == "360"


# =============================================================================
# CONCRETE SCENARIOS
# =============================================================================

class TestScenarios:
    """Worked examples in the Goldilocks field."""

    def test_nineteen_squared(self):
        F = OxfoiFieldElement
        assert F(19) * F(19) == F(361)

    def test_sqrt_361(self):
        F = OxfoiFieldElement
        root = F(361).sqrt()
        assert root * root == F(361)
        assert root in (F(19), F(GOLDILOCKS_PRIME - 19))
        # smaller root
        assert root == F(19)

    def test_inverse_zero_every_backend(self):
        for field in (OxfoiFieldElement, Curve25519FieldElement, Bn128FieldElement):
            with pytest.raises(DivisionByZero):
                field(0).inverse()

    def test_sqrt_non_residue(self):
        with pytest.raises(NotAResidue):
            F13(2).sqrt()

    def test_contract_is_abstract(self):
        with pytest.raises(TypeError):
            FieldElement(1)

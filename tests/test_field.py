import pytest
from hypothesis import given
from hypothesis import strategies as st

from edsig.field import P, FieldElement


def _limbs_to_int(*limbs):
    return sum(limb << (64 * i) for i, limb in enumerate(limbs))


SQRT_M1_INT = _limbs_to_int(
    0xC4EE1B274A0EA0B0, 0x2F431806AD2FE478, 0x2B4D00993DFBD7A7, 0x2B8324804FC1DF0B
)
ECD_INT = _limbs_to_int(
    0x75EB4DCA135978A3, 0x00700A4D4141D8AB, 0x8CC740797779E898, 0x52036CEE2B6FFE73
)
EC2D_INT = _limbs_to_int(
    0xEBD69B9426B2F146, 0x00E0149A8283B156, 0x198E80F2EEF3D130, 0xA406D9DC56DFFCE7
)
BASE_X_INT = _limbs_to_int(
    0xC9562D608F25D51A, 0x692CC7609525A7B2, 0xC0A4E231FDD6DC5C, 0x216936D3CD6E53FE
)
BASE_Y_INT = _limbs_to_int(
    0x6666666666666658, 0x6666666666666666, 0x6666666666666666, 0x6666666666666666
)
BASE_T_INT = _limbs_to_int(
    0x6DDE8AB3A5B7DDA3, 0x20F09F80775152F5, 0x66EA4E8E64ABE37D, 0x67875F0FD78B7665
)

element_ints = st.integers(min_value=0, max_value=P - 1)
nonzero_ints = st.integers(min_value=1, max_value=P - 1)
encodings = st.binary(min_size=32, max_size=32)


def test_sqrt_minus_one_squares_to_minus_one():
    sqrt_m1 = FieldElement.from_int(SQRT_M1_INT)
    assert sqrt_m1.square() == -FieldElement.from_int(1)


def test_ec2d_is_twice_ecd():
    ecd = FieldElement.from_int(ECD_INT)
    assert ecd + ecd == FieldElement.from_int(EC2D_INT)


def test_base_point_lies_on_curve():
    x2 = FieldElement.from_int(BASE_X_INT).square()
    y2 = FieldElement.from_int(BASE_Y_INT).square()
    one = FieldElement.from_int(1)
    ecd = FieldElement.from_int(ECD_INT)
    assert y2 - x2 == one + ecd * x2 * y2


def test_base_point_extended_coordinate():
    x = FieldElement.from_int(BASE_X_INT)
    y = FieldElement.from_int(BASE_Y_INT)
    assert x * y == FieldElement.from_int(BASE_T_INT)


def test_prime_encodes_to_zero():
    data = P.to_bytes(32, "little")
    element = FieldElement.from_bytes(data)
    assert element.is_zero()
    assert element.to_bytes() == bytes(32)


def test_top_bit_is_ignored():
    data = bytes([5] + [0] * 30 + [0x80])
    assert FieldElement.from_bytes(data) == FieldElement.from_int(5)


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        FieldElement.from_bytes(bytes(31))


def test_from_int_rejects_non_int():
    with pytest.raises(TypeError):
        FieldElement.from_int(1.5)


def test_parity_of_small_values():
    assert FieldElement.from_int(1).parity() == 1
    assert FieldElement.from_int(2).parity() == 0
    assert (-FieldElement.from_int(1)).parity() == 0


def test_invert_zero_is_zero():
    assert FieldElement.from_int(0).invert().is_zero()


def test_pow2523_of_one():
    assert FieldElement.from_int(1).pow2523() == FieldElement.from_int(1)


@given(encodings)
def test_bytes_round_trip_of_canonical(data):
    value = int.from_bytes(data, "little") & ((1 << 255) - 1)
    element = FieldElement.from_bytes(data)
    again = FieldElement.from_bytes(element.to_bytes())
    assert again == element
    if value < P:
        assert element.to_bytes() == value.to_bytes(32, "little")


@given(element_ints)
def test_negation_cancels(value):
    x = FieldElement.from_int(value)
    assert (x + (-x)).is_zero()
    assert -(-x) == x


@given(element_ints, element_ints)
def test_subtraction_inverts_addition(a, b):
    x = FieldElement.from_int(a)
    y = FieldElement.from_int(b)
    assert (x + y) - y == x


@given(nonzero_ints)
def test_invert_is_multiplicative_inverse(value):
    x = FieldElement.from_int(value)
    assert x * x.invert() == FieldElement.from_int(1)
    assert not x.is_zero()


@given(element_ints)
def test_square_matches_mul(value):
    x = FieldElement.from_int(value)
    assert x.square() == x * x


@given(nonzero_ints)
def test_pow2523_gives_square_root_candidate(value):
    a = FieldElement.from_int(value).square()
    candidate = a * a.pow2523() * a.pow2523() * a  # a^((p+3)/4)
    root = a * a.pow2523()  # a^((p+3)/8)
    assert root.square() in (a, -a)
    assert candidate == root.square()


@given(nonzero_ints)
def test_parity_flips_under_negation(value):
    x = FieldElement.from_int(value)
    assert x.parity() + (-x).parity() == 1


@given(element_ints, element_ints, element_ints)
def test_distributive(a, b, c):
    x = FieldElement.from_int(a)
    y = FieldElement.from_int(b)
    z = FieldElement.from_int(c)
    assert x * (y + z) == x * y + x * z


def test_operators_reject_foreign_types():
    with pytest.raises(TypeError):
        FieldElement.from_int(1) + 1


def test_equal_elements_hash_equally():
    a = FieldElement.from_int(P + 3)
    b = FieldElement.from_int(3)
    assert a == b
    assert hash(a) == hash(b)
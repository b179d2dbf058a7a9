import pytest
from hypothesis import given, settings, strategies as st

from altbn128.fields import Fq, Fq2, Fr
from altbn128.g2 import G2


def _rescaled(point: G2, lam: Fq2) -> G2:
    lam2 = lam.squared()
    return G2(point.x * lam2, point.y * lam2 * lam, point.z * lam)


def test_generator_is_well_formed():
    assert G2.one().is_well_formed()
    assert G2.zero().is_well_formed()


def test_generator_has_group_order():
    assert (G2.order() * G2.one()).is_zero()
    assert not ((G2.order() - 1) * G2.one()).is_zero()


def test_constants():
    assert G2.order() == Fr.MODULUS
    assert G2.base_field_char() == Fq.MODULUS
    assert G2.size_in_bits() == 2 * Fq.size_in_bits() + 1


def test_zero_identity():
    p = G2.one()
    assert p + G2.zero() == p
    assert G2.zero() + p == p
    assert G2.zero().dbl().is_zero()
    assert (p - p).is_zero()
    assert (p + (-p)).is_zero()


def test_dbl_matches_addition():
    p = 5 * G2.one()
    assert p.dbl() == p + p
    assert p.dbl() == p.add(p)
    assert p.dbl() == 10 * G2.one()


def test_add_and_operator_agree():
    p = 3 * G2.one()
    q = 7 * G2.one()
    assert p.add(q) == p + q
    assert p + q == q + p
    assert p + q == 10 * G2.one()
    assert (p + q).is_well_formed()


def test_mixed_add_matches_add():
    p = 3 * G2.one()
    q = (4 * G2.one()).to_affine()
    assert q.is_special()
    assert p.mixed_add(q) == p + q
    assert p.mixed_add(p.to_affine()) == p.dbl()


def test_mixed_add_rejects_non_special():
    p = 3 * G2.one()
    q = 4 * G2.one()
    assert not q.is_special()
    with pytest.raises(ValueError):
        p.mixed_add(q)


def test_equality_across_representations():
    p = 6 * G2.one()
    other = _rescaled(p, Fq2(5, 11))
    assert p == other
    assert other.is_well_formed()
    assert p != p.dbl()
    assert p != G2.zero()


def test_to_affine():
    p = 9 * G2.one()
    affine = p.to_affine()
    assert affine.z == Fq2.one()
    assert affine == p
    zero = G2.zero().to_affine()
    assert zero.x == Fq2.zero() and zero.y == Fq2.one() and zero.z == Fq2.zero()
    assert p.to_special() == p


def test_negative_and_field_scalars():
    p = G2.one()
    assert (-3) * p == -(3 * p)
    assert Fr(4) * p == 4 * p
    assert p * 2 == p.dbl()


def test_mul_by_q_matches_scalar_q():
    p = G2.one()
    assert p.mul_by_q() == Fq.MODULUS * p
    assert p.mul_by_q().is_well_formed()


def test_mul_by_q_is_additive():
    p = 2 * G2.one()
    q = 5 * G2.one()
    assert (p + q).mul_by_q() == p.mul_by_q() + q.mul_by_q()


def test_mul_by_b():
    assert G2.mul_by_b(Fq2(1, 1)) == Fq2(-3, -3)
    assert G2.mul_by_b(Fq2.zero()) == Fq2.zero()


def test_serialize_zero():
    assert G2.zero().serialize() == "1 0 0 1"
    assert G2.deserialize("1 0 0 1").is_zero()


def test_serialize_round_trip():
    for k in (1, 2, 17, 123456789):
        p = k * G2.one()
        text = p.serialize()
        assert text.split()[0] == "0"
        assert G2.deserialize(text) == p


def test_serialize_generator_fields():
    parts = G2.one().serialize().split()
    assert parts[1] == str(G2.one().x.c0.value)
    assert parts[2] == str(G2.one().x.c1.value)


def test_deserialize_errors():
    with pytest.raises(ValueError):
        G2.deserialize("0 1 2")
    with pytest.raises(ValueError):
        G2.deserialize("2 1 2 0")
    with pytest.raises(ValueError):
        G2.deserialize("0 1 2 5")


def test_batch_to_special():
    points = [k * G2.one() for k in (2, 3, 5, 11)]
    specials = G2.batch_to_special_all_non_zeros(points)
    assert len(specials) == len(points)
    for original, special in zip(points, specials):
        assert special.is_special()
        assert special == original
        assert special.z == Fq2.one()


def test_batch_to_special_empty():
    assert G2.batch_to_special_all_non_zeros([]) == []


def test_random_element_in_group():
    p = G2.random_element()
    assert p.is_well_formed()
    assert (G2.order() * p).is_zero()


@settings(max_examples=10, deadline=None)
@given(st.integers(min_value=0, max_value=2**40), st.integers(min_value=0, max_value=2**40))
def test_scalar_distributes(a, b):
    g = G2.one()
    assert (a + b) * g == a * g + b * g


@settings(max_examples=10, deadline=None)
@given(st.integers(min_value=1, max_value=2**32))
def test_serialize_round_trip_property(k):
    p = k * G2.one()
    assert G2.deserialize(p.serialize()) == p
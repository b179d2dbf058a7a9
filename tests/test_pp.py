import pytest

from altbn128.fields import Fq, Fq12, Fr
from altbn128.g1 import G1
from altbn128.g2 import G2
from altbn128.pairing import ate_precompute_g2, reduced_pairing
from altbn128.pp import AltBn128PP


@pytest.fixture(scope="module")
def base_pairing():
    return AltBn128PP.reduced_pairing(G1.one(), G2.one())


def test_reduced_pairing_matches_module_function(base_pairing):
    assert base_pairing == reduced_pairing(G1.one(), G2.one())


def test_pairing_is_nondegenerate_and_has_order_r(base_pairing):
    assert not (base_pairing == Fq12.one())
    assert base_pairing ** Fr.MODULUS == Fq12.one()


def test_bilinear_in_g1(base_pairing):
    doubled = AltBn128PP.reduced_pairing(G1.one().dbl(), G2.one())
    assert doubled == base_pairing.squared()


def test_bilinear_in_g2(base_pairing):
    tripled = AltBn128PP.reduced_pairing(G1.one(), 3 * G2.one())
    assert tripled == base_pairing * base_pairing * base_pairing


def test_scalar_moves_between_groups():
    left = AltBn128PP.reduced_pairing(5 * G1.one(), G2.one())
    right = AltBn128PP.reduced_pairing(G1.one(), 5 * G2.one())
    assert left == right


def test_negation_gives_inverse(base_pairing):
    neg = AltBn128PP.reduced_pairing(-G1.one(), G2.one())
    assert neg * base_pairing == Fq12.one()


def test_final_exponentiation_of_pairing(base_pairing):
    f = AltBn128PP.pairing(G1.one(), G2.one())
    assert AltBn128PP.final_exponentiation(f) == base_pairing


def test_final_exponentiation_of_one():
    assert AltBn128PP.final_exponentiation(Fq12.one()) == Fq12.one()


def test_precompute_g1_is_affine():
    prec = AltBn128PP.precompute_g1(G1.one().dbl().dbl())
    affine = G1.one().dbl().dbl().to_affine()
    assert prec.px == affine.x
    assert prec.py == affine.y


def test_precompute_g1_of_generator():
    prec = AltBn128PP.precompute_g1(G1.one())
    assert prec.px == Fq(1)
    assert prec.py == Fq(2)


def test_precompute_g2_matches_ate_precomputation():
    q = G2.one()
    assert AltBn128PP.precompute_g2(q) == ate_precompute_g2(q)


def test_miller_loop_equals_pairing():
    p, q = G1.one(), G2.one()
    f = AltBn128PP.miller_loop(AltBn128PP.precompute_g1(p), AltBn128PP.precompute_g2(q))
    assert f == AltBn128PP.pairing(p, q)


def test_double_miller_loop_is_product():
    p1, q1 = G1.one(), G2.one()
    p2, q2 = G1.one().dbl(), G2.one()
    pp1, pq1 = AltBn128PP.precompute_g1(p1), AltBn128PP.precompute_g2(q1)
    pp2, pq2 = AltBn128PP.precompute_g1(p2), AltBn128PP.precompute_g2(q2)
    combined = AltBn128PP.double_miller_loop(pp1, pq1, pp2, pq2)
    separate = AltBn128PP.miller_loop(pp1, pq1) * AltBn128PP.miller_loop(pp2, pq2)
    assert combined == separate


def test_types_are_curve_types():
    assert AltBn128PP.G1_TYPE.one() == G1.one()
    assert AltBn128PP.FP_TYPE.MODULUS == Fr.MODULUS
    assert AltBn128PP.HAS_AFFINE_PAIRING is False
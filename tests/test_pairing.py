import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from altbn128.fields import ATE_LOOP_COUNT, FINAL_EXPONENT_Z, Fq, Fq2, Fq12, Fr
from altbn128.g1 import G1
from altbn128.g2 import G2
from altbn128.pairing import (
    AteEllCoeffs,
    AteG1Precomp,
    AteG2Precomp,
    ate_double_miller_loop,
    ate_miller_loop,
    ate_pairing,
    ate_precompute_g1,
    ate_precompute_g2,
    ate_reduced_pairing,
    double_miller_loop,
    doubling_step_for_flipped_miller_loop,
    exp_by_neg_z,
    final_exponentiation,
    final_exponentiation_first_chunk,
    final_exponentiation_last_chunk,
    miller_loop,
    mixed_addition_step_for_flipped_miller_loop,
    pairing,
    precompute_g1,
    precompute_g2,
    reduced_pairing,
)

fq_values = st.integers(min_value=0, max_value=Fq.MODULUS - 1)


@pytest.fixture(scope="module")
def base_pairing():
    return reduced_pairing(G1.one(), G2.one())


@pytest.fixture(scope="module")
def prec_q():
    return ate_precompute_g2(G2.one())


def _homogeneous_affine(point):
    z_inv = point.z.inverse()
    return point.x * z_inv, point.y * z_inv


def test_pairing_is_nondegenerate_with_order_r(base_pairing):
    assert base_pairing != Fq12.one()
    assert base_pairing ** Fr.MODULUS == Fq12.one()


def test_bilinear_in_first_argument(base_pairing):
    assert reduced_pairing(G1.one().dbl(), G2.one()) == base_pairing.squared()


def test_bilinear_in_second_argument(base_pairing):
    assert reduced_pairing(G1.one(), G2.one().dbl()) == base_pairing.squared()


def test_bilinear_with_scalars(base_pairing):
    assert reduced_pairing(3 * G1.one(), 5 * G2.one()) == base_pairing ** 15


def test_negated_point_gives_inverse(base_pairing):
    negated = reduced_pairing(-G1.one(), G2.one())
    assert negated == base_pairing.unitary_inverse()
    assert negated * base_pairing == Fq12.one()


def test_reduced_pairing_is_final_exponentiation_of_pairing(base_pairing):
    f = pairing(G1.one(), G2.one())
    assert f == ate_pairing(G1.one(), G2.one())
    assert final_exponentiation(f) == base_pairing


def test_ate_reduced_pairing_matches_projective_input(base_pairing):
    p = G1.one()
    z = Fq(7)
    scaled = G1(p.x * z.squared(), p.y * z.squared() * z, z)
    assert ate_reduced_pairing(scaled, G2.one()) == base_pairing


def test_double_miller_loop_is_product(prec_q):
    p1 = precompute_g1(G1.one())
    p2 = precompute_g1(G1.one().dbl())
    q2 = precompute_g2(G2.one().dbl())
    expected = miller_loop(p1, prec_q) * miller_loop(p2, q2)
    assert double_miller_loop(p1, prec_q, p2, q2) == expected
    assert ate_double_miller_loop(p1, prec_q, p2, q2) == expected


def test_miller_loop_wrappers_agree(prec_q):
    p = ate_precompute_g1(G1.one())
    assert miller_loop(p, prec_q) == ate_miller_loop(p, prec_q)


def test_miller_loop_rejects_short_precomputation(prec_q):
    short = AteG2Precomp(prec_q.qx, prec_q.qy, prec_q.coeffs[:3])
    with pytest.raises(ValueError):
        ate_miller_loop(ate_precompute_g1(G1.one()), short)


def test_first_chunk_is_unitary():
    f = final_exponentiation_first_chunk(Fq12.random_element())
    assert f.unitary_inverse() == f.inverse()


def test_final_exponentiation_chains_chunks():
    elt = Fq12.random_element()
    first = final_exponentiation_first_chunk(elt)
    assert final_exponentiation(elt) == final_exponentiation_last_chunk(first)


def test_exp_by_neg_z_inverts_power_of_z():
    u = final_exponentiation_first_chunk(Fq12.random_element())
    assert exp_by_neg_z(u) * (u ** FINAL_EXPONENT_Z) == Fq12.one()


def test_precompute_g1_is_affine():
    p = G1.one()
    z = Fq(11)
    scaled = G1(p.x * z.squared(), p.y * z.squared() * z, z)
    assert ate_precompute_g1(scaled) == AteG1Precomp(Fq(1), Fq(2))


def test_precompute_g2_coefficient_count(prec_q):
    bits = bin(ATE_LOOP_COUNT)[3:]
    assert len(prec_q.coeffs) == len(bits) + bits.count("1") + 2
    assert prec_q.qx == G2.one().x
    assert prec_q.qy == G2.one().y


def test_precompute_g2_zero_point_raises():
    with pytest.raises(ArithmeticError):
        ate_precompute_g2(G2.zero())


def test_doubling_step_doubles_point():
    q = G2.one()
    two_inv = Fq(2).inverse()
    doubled, _ = doubling_step_for_flipped_miller_loop(two_inv, G2(q.x, q.y, Fq2.one()))
    expected = q.dbl().to_affine()
    assert _homogeneous_affine(doubled) == (expected.x, expected.y)

    quadrupled, _ = doubling_step_for_flipped_miller_loop(two_inv, doubled)
    expected = (4 * q).to_affine()
    assert _homogeneous_affine(quadrupled) == (expected.x, expected.y)


def test_mixed_addition_step_adds_base():
    q = G2.one()
    two_inv = Fq(2).inverse()
    doubled, _ = doubling_step_for_flipped_miller_loop(two_inv, G2(q.x, q.y, Fq2.one()))
    tripled, coeffs = mixed_addition_step_for_flipped_miller_loop(q, doubled)
    expected = (3 * q).to_affine()
    assert _homogeneous_affine(tripled) == (expected.x, expected.y)
    assert coeffs.ell_vw == doubled.x - q.x * doubled.z


def test_g1_precomp_format():
    assert AteG1Precomp(Fq(1), Fq(2)).serialize() == "1 2"
    assert AteG1Precomp.deserialize("1 2") == AteG1Precomp(Fq(1), Fq(2))


def test_ell_coeffs_format():
    c = AteEllCoeffs(Fq2(1, 2), Fq2(3, 4), Fq2(5, 6))
    assert c.serialize() == "1 2 3 4 5 6"


@settings(max_examples=25)
@given(st.lists(fq_values, min_size=6, max_size=6))
def test_ell_coeffs_round_trip(values):
    c = AteEllCoeffs(Fq2(values[0], values[1]), Fq2(values[2], values[3]),
                     Fq2(values[4], values[5]))
    assert AteEllCoeffs.deserialize(c.serialize()) == c


@settings(max_examples=25)
@given(fq_values, fq_values)
def test_g1_precomp_round_trip(px, py):
    prec = AteG1Precomp(Fq(px), Fq(py))
    assert AteG1Precomp.deserialize(prec.serialize()) == prec


def test_g2_precomp_round_trip(prec_q):
    text = prec_q.serialize()
    assert text.splitlines()[1] == str(len(prec_q.coeffs))
    assert AteG2Precomp.deserialize(text) == prec_q


@pytest.mark.parametrize("text", ["1", "1 2 3", "a 2"])
def test_g1_precomp_rejects_malformed(text):
    with pytest.raises(ValueError):
        AteG1Precomp.deserialize(text)


def test_ell_coeffs_rejects_wrong_length():
    with pytest.raises(ValueError):
        AteEllCoeffs.deserialize("1 2 3 4 5")


def test_g2_precomp_rejects_count_mismatch():
    with pytest.raises(ValueError):
        AteG2Precomp.deserialize("1 0 2 0\n2\n1 2 3 4 5 6\n")
    with pytest.raises(ValueError):
        AteG2Precomp.deserialize("1 0 2")
"""Optimal ate pairing on alt_bn128: precomputation, Miller loop and final exponentiation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .fields import (
    ATE_IS_LOOP_COUNT_NEG,
    ATE_LOOP_COUNT,
    FINAL_EXPONENT_IS_Z_NEG,
    FINAL_EXPONENT_Z,
    TWIST,
    TWIST_COEFF_B,
    Fq,
    Fq2,
    Fq12,
)
from .g1 import G1
from .g2 import G2

OUTPUT_SEPARATOR = " "
OUTPUT_NEWLINE = "\n"

# Bits of the loop count from just below the most significant one down to bit 0.
_LOOP_BITS: tuple[bool, ...] = tuple(bit == "1" for bit in bin(ATE_LOOP_COUNT)[3:])


def _parse_ints(tokens: list[str], what: str) -> list[int]:
    try:
        return [int(token, 10) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"malformed {what}: {exc}") from None


def _fq2_tokens(value: Fq2) -> str:
    return f"{value.c0.value}{OUTPUT_SEPARATOR}{value.c1.value}"


@dataclass(frozen=True)
class AteG1Precomp:
    """Affine coordinates of a G1 point, ready for the Miller loop."""

    px: Fq
    py: Fq

    def serialize(self) -> str:
        return f"{self.px.value}{OUTPUT_SEPARATOR}{self.py.value}"

    @classmethod
    def deserialize(cls, text: str) -> AteG1Precomp:
        tokens = text.split()
        if len(tokens) != 2:
            raise ValueError(f"expected 2 fields, got {len(tokens)}")
        px, py = _parse_ints(tokens, "G1 precomputation")
        return cls(Fq(px), Fq(py))


@dataclass(frozen=True)
class AteEllCoeffs:
    """Coefficients of one line function of the flipped Miller loop."""

    ell_0: Fq2
    ell_vw: Fq2
    ell_vv: Fq2

    def serialize(self) -> str:
        return OUTPUT_SEPARATOR.join(
            _fq2_tokens(value) for value in (self.ell_0, self.ell_vw, self.ell_vv)
        )

    @classmethod
    def deserialize(cls, text: str) -> AteEllCoeffs:
        tokens = text.split()
        if len(tokens) != 6:
            raise ValueError(f"expected 6 fields, got {len(tokens)}")
        return cls._from_ints(_parse_ints(tokens, "line coefficients"))

    @classmethod
    def _from_ints(cls, values: list[int]) -> AteEllCoeffs:
        a0, a1, b0, b1, c0, c1 = values
        return cls(Fq2(a0, a1), Fq2(b0, b1), Fq2(c0, c1))


@dataclass(frozen=True)
class AteG2Precomp:
    """Affine coordinates of a G2 point and the line coefficients of its Miller loop."""

    qx: Fq2
    qy: Fq2
    coeffs: tuple[AteEllCoeffs, ...] = ()

    def serialize(self) -> str:
        head = f"{_fq2_tokens(self.qx)}{OUTPUT_SEPARATOR}{_fq2_tokens(self.qy)}\n"
        body = "".join(c.serialize() + OUTPUT_NEWLINE for c in self.coeffs)
        return f"{head}{len(self.coeffs)}\n{body}"

    @classmethod
    def deserialize(cls, text: str) -> AteG2Precomp:
        tokens = text.split()
        if len(tokens) < 5:
            raise ValueError("truncated G2 precomputation")
        values = _parse_ints(tokens, "G2 precomputation")
        count = values[4]
        body = values[5:]
        if count < 0 or len(body) != 6 * count:
            raise ValueError("coefficient count does not match data")
        coeffs = tuple(
            AteEllCoeffs._from_ints(body[6 * k:6 * k + 6]) for k in range(count)
        )
        return cls(Fq2(values[0], values[1]), Fq2(values[2], values[3]), coeffs)


# Final exponentiation.

def final_exponentiation_first_chunk(elt: Fq12) -> Fq12:
    """Raise to (q^6 - 1)(q^2 + 1), the easy part of the final exponent."""
    a = Fq12(elt.c0, -elt.c1)
    b = elt.inverse()
    c = a * b
    d = c.frobenius_map(2)
    return d * c


def exp_by_neg_z(elt: Fq12) -> Fq12:
    """Raise a cyclotomic element to -z."""
    result = elt.cyclotomic_exp(FINAL_EXPONENT_Z)
    if not FINAL_EXPONENT_IS_Z_NEG:
        result = result.unitary_inverse()
    return result


def final_exponentiation_last_chunk(elt: Fq12) -> Fq12:
    """Hard part of the final exponent, by the Fuentes-Castaneda et al. addition chain."""
    a = exp_by_neg_z(elt)
    b = a.cyclotomic_squared()
    c = b.cyclotomic_squared()
    d = c * b
    e = exp_by_neg_z(d)
    f = e.cyclotomic_squared()
    g = exp_by_neg_z(f)
    h = d.unitary_inverse()
    i = g.unitary_inverse()
    j = i * e
    k = j * h
    l_ = k * b
    m = k * e
    n = m * elt
    o = l_.frobenius_map(1)
    p = o * n
    q = k.frobenius_map(2)
    r = q * p
    s = elt.unitary_inverse()
    t = s * l_
    u = t.frobenius_map(3)
    return u * r


def final_exponentiation(elt: Fq12) -> Fq12:
    return final_exponentiation_last_chunk(final_exponentiation_first_chunk(elt))


# Miller loop steps, with the running point in homogeneous projective coordinates.

def doubling_step_for_flipped_miller_loop(two_inv: Fq, current: G2) -> tuple[G2, AteEllCoeffs]:
    """Double the running point; return it with the tangent line coefficients."""
    x, y, z = current.x, current.y, current.z

    a = two_inv * (x * y)
    b = y.squared()
    c = z.squared()
    d = c + c + c
    e = TWIST_COEFF_B * d
    f = e + e + e
    g = two_inv * (b + f)
    h = (y + z).squared() - (b + c)
    i = e - b
    j = x.squared()
    e_squared = e.squared()

    doubled = G2(a * (b - f), g.squared() - (e_squared + e_squared + e_squared), b * h)
    coeffs = AteEllCoeffs(ell_0=TWIST * i, ell_vw=-h, ell_vv=j + j + j)
    return doubled, coeffs


def mixed_addition_step_for_flipped_miller_loop(base: G2, current: G2) -> tuple[G2, AteEllCoeffs]:
    """Add the affine base point to the running point; return it with the line coefficients."""
    x1, y1, z1 = current.x, current.y, current.z
    x2, y2 = base.x, base.y

    d = x1 - x2 * z1
    e = y1 - y2 * z1
    f = d.squared()
    g = e.squared()
    h = d * f
    i = x1 * f
    j = h + z1 * g - (i + i)

    added = G2(d * j, e * (i - j) - (h * y1), z1 * h)
    coeffs = AteEllCoeffs(ell_0=TWIST * (e * x2 - d * y2), ell_vw=d, ell_vv=-e)
    return added, coeffs


def ate_precompute_g1(p: G1) -> AteG1Precomp:
    affine = p.to_affine()
    return AteG1Precomp(affine.x, affine.y)


def ate_precompute_g2(q: G2) -> AteG2Precomp:
    affine = q.to_affine()
    two_inv = Fq(2).inverse()

    r = G2(affine.x, affine.y, Fq2.one())
    coeffs: list[AteEllCoeffs] = []
    for bit in _LOOP_BITS:
        r, c = doubling_step_for_flipped_miller_loop(two_inv, r)
        coeffs.append(c)
        if bit:
            r, c = mixed_addition_step_for_flipped_miller_loop(affine, r)
            coeffs.append(c)

    q1 = affine.mul_by_q()
    if q1.z != Fq2.one():
        raise ArithmeticError("Frobenius image of the point is not affine")
    q2 = q1.mul_by_q()
    if q2.z != Fq2.one():
        raise ArithmeticError("Frobenius image of the point is not affine")

    if ATE_IS_LOOP_COUNT_NEG:
        r = G2(r.x, -r.y, r.z)
    q2 = G2(q2.x, -q2.y, q2.z)

    r, c = mixed_addition_step_for_flipped_miller_loop(q1, r)
    coeffs.append(c)
    r, c = mixed_addition_step_for_flipped_miller_loop(q2, r)
    coeffs.append(c)

    return AteG2Precomp(affine.x, affine.y, tuple(coeffs))


def _apply_line(f: Fq12, c: AteEllCoeffs, prec_p: AteG1Precomp) -> Fq12:
    return f.mul_by_024(c.ell_0, prec_p.py * c.ell_vw, prec_p.px * c.ell_vv)


def _next_coeffs(coeffs: Iterator[AteEllCoeffs]) -> AteEllCoeffs:
    try:
        return next(coeffs)
    except StopIteration:
        raise ValueError("G2 precomputation has too few line coefficients") from None


def ate_miller_loop(prec_p: AteG1Precomp, prec_q: AteG2Precomp) -> Fq12:
    f = Fq12.one()
    coeffs = iter(prec_q.coeffs)
    for bit in _LOOP_BITS:
        f = _apply_line(f.squared(), _next_coeffs(coeffs), prec_p)
        if bit:
            f = _apply_line(f, _next_coeffs(coeffs), prec_p)

    if ATE_IS_LOOP_COUNT_NEG:
        f = f.inverse()

    f = _apply_line(f, _next_coeffs(coeffs), prec_p)
    f = _apply_line(f, _next_coeffs(coeffs), prec_p)
    return f


def ate_double_miller_loop(prec_p1: AteG1Precomp, prec_q1: AteG2Precomp,
                           prec_p2: AteG1Precomp, prec_q2: AteG2Precomp) -> Fq12:
    """Product of two Miller loops sharing the squarings."""
    f = Fq12.one()
    coeffs1 = iter(prec_q1.coeffs)
    coeffs2 = iter(prec_q2.coeffs)

    def both(f: Fq12) -> Fq12:
        f = _apply_line(f, _next_coeffs(coeffs1), prec_p1)
        return _apply_line(f, _next_coeffs(coeffs2), prec_p2)

    for bit in _LOOP_BITS:
        f = both(f.squared())
        if bit:
            f = both(f)

    if ATE_IS_LOOP_COUNT_NEG:
        f = f.inverse()

    f = both(f)
    f = both(f)
    return f


def ate_pairing(p: G1, q: G2) -> Fq12:
    return ate_miller_loop(ate_precompute_g1(p), ate_precompute_g2(q))


def ate_reduced_pairing(p: G1, q: G2) -> Fq12:
    return final_exponentiation(ate_pairing(p, q))


# The pairing of choice for this curve is the ate pairing.

def precompute_g1(p: G1) -> AteG1Precomp:
    return ate_precompute_g1(p)


def precompute_g2(q: G2) -> AteG2Precomp:
    return ate_precompute_g2(q)


def miller_loop(prec_p: AteG1Precomp, prec_q: AteG2Precomp) -> Fq12:
    return ate_miller_loop(prec_p, prec_q)


def double_miller_loop(prec_p1: AteG1Precomp, prec_q1: AteG2Precomp,
                       prec_p2: AteG1Precomp, prec_q2: AteG2Precomp) -> Fq12:
    return ate_double_miller_loop(prec_p1, prec_q1, prec_p2, prec_q2)


def pairing(p: G1, q: G2) -> Fq12:
    return ate_pairing(p, q)


def reduced_pairing(p: G1, q: G2) -> Fq12:
    return ate_reduced_pairing(p, q)
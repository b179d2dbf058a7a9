"""Public parameters of the alt_bn128 pairing-friendly curve, bundled in one place."""

from __future__ import annotations

from .fields import GT, Fq, Fq2, Fq12, Fr
from .g1 import G1
from .g2 import G2
from .pairing import (
    AteG1Precomp,
    AteG2Precomp,
    double_miller_loop as _double_miller_loop,
    final_exponentiation as _final_exponentiation,
    miller_loop as _miller_loop,
    pairing as _pairing,
    precompute_g1 as _precompute_g1,
    precompute_g2 as _precompute_g2,
    reduced_pairing as _reduced_pairing,
)


class AltBn128PP:
    """The types and pairing operations of alt_bn128 behind one interface."""

    FP_TYPE = Fr
    G1_TYPE = G1
    G2_TYPE = G2
    G1_PRECOMP_TYPE = AteG1Precomp
    G2_PRECOMP_TYPE = AteG2Precomp
    FQ_TYPE = Fq
    FQE_TYPE = Fq2
    FQK_TYPE = Fq12
    GT_TYPE = GT

    HAS_AFFINE_PAIRING = False

    @staticmethod
    def final_exponentiation(elt: Fq12) -> Fq12:
        return _final_exponentiation(elt)

    @staticmethod
    def precompute_g1(p: G1) -> AteG1Precomp:
        return _precompute_g1(p)

    @staticmethod
    def precompute_g2(q: G2) -> AteG2Precomp:
        return _precompute_g2(q)

    @staticmethod
    def miller_loop(prec_p: AteG1Precomp, prec_q: AteG2Precomp) -> Fq12:
        return _miller_loop(prec_p, prec_q)

    @staticmethod
    def double_miller_loop(prec_p1: AteG1Precomp, prec_q1: AteG2Precomp,
                           prec_p2: AteG1Precomp, prec_q2: AteG2Precomp) -> Fq12:
        return _double_miller_loop(prec_p1, prec_q1, prec_p2, prec_q2)

    @staticmethod
    def pairing(p: G1, q: G2) -> Fq12:
        return _pairing(p, q)

    @staticmethod
    def reduced_pairing(p: G1, q: G2) -> Fq12:
        return _reduced_pairing(p, q)
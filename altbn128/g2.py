"""The group G2: points of the twist y^2 = x^3 + 3/(9+u) over Fq2, in Jacobian coordinates."""

from __future__ import annotations

from typing import Any, Iterable

from .fields import (
    TWIST_COEFF_B,
    TWIST_MUL_BY_B_C0,
    TWIST_MUL_BY_B_C1,
    TWIST_MUL_BY_Q_X,
    TWIST_MUL_BY_Q_Y,
    Fq,
    Fq2,
    Fr,
    PrimeField,
)

OUTPUT_SEPARATOR = " "


def _batch_invert(values: list[Fq2]) -> list[Fq2]:
    """Invert every element with a single field inversion."""
    prefix: list[Fq2] = []
    acc = Fq2.one()
    for value in values:
        prefix.append(acc)
        acc = acc * value
    acc_inv = acc.inverse()
    result: list[Fq2] = [Fq2.zero()] * len(values)
    for position in reversed(range(len(values))):
        result[position] = acc_inv * prefix[position]
        acc_inv = acc_inv * values[position]
    return result


class G2:
    """A point of G2 in Jacobian coordinates (X : Y : Z), affine (X/Z^2, Y/Z^3)."""

    __slots__ = ("x", "y", "z")

    WNAF_WINDOW_TABLE = (5, 15, 39, 109)
    FIXED_BASE_EXP_WINDOW_TABLE = (
        1, 5, 10, 25, 59, 154, 334, 743, 2034, 4988, 8888, 26271,
        39768, 106276, 141703, 462423, 926872, 0, 4873049, 5706708, 0, 31673815,
    )

    def __init__(self, x: Fq2 | None = None, y: Fq2 | None = None,
                 z: Fq2 | None = None) -> None:
        self.x = Fq2.zero() if x is None else x
        self.y = Fq2.one() if y is None else y
        self.z = Fq2.zero() if z is None else z

    def __repr__(self) -> str:
        if self.is_zero():
            return "G2(O)"
        affine = self.to_affine()
        return f"G2({affine.x!r}, {affine.y!r})"

    def __hash__(self) -> int:
        affine = self.to_affine()
        return hash(("G2", affine.x, affine.y, affine.z))

    @staticmethod
    def mul_by_b(elt: Fq2) -> Fq2:
        """Multiply componentwise by the twist's b-multiplication constants."""
        return Fq2(TWIST_MUL_BY_B_C0 * elt.c0, TWIST_MUL_BY_B_C1 * elt.c1)

    def to_affine(self) -> G2:
        """Return the same point with Z = 1 (or the canonical zero (0 : 1 : 0))."""
        if self.is_zero():
            return G2(Fq2.zero(), Fq2.one(), Fq2.zero())
        z_inv = self.z.inverse()
        z2_inv = z_inv.squared()
        z3_inv = z2_inv * z_inv
        return G2(self.x * z2_inv, self.y * z3_inv, Fq2.one())

    def to_special(self) -> G2:
        return self.to_affine()

    def is_special(self) -> bool:
        return self.is_zero() or self.z == Fq2.one()

    def is_zero(self) -> bool:
        return self.z.is_zero()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, G2):
            return NotImplemented
        if self.is_zero():
            return other.is_zero()
        if other.is_zero():
            return False
        z1_squared = self.z.squared()
        z2_squared = other.z.squared()
        if self.x * z2_squared != other.x * z1_squared:
            return False
        z1_cubed = self.z * z1_squared
        z2_cubed = other.z * z2_squared
        return self.y * z2_cubed == other.y * z1_cubed

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, G2):
            return NotImplemented
        if self.is_zero():
            return other
        if other.is_zero():
            return self

        z1z1 = self.z.squared()
        z2z2 = other.z.squared()
        u1 = self.x * z2z2
        u2 = other.x * z1z1
        s1 = self.y * (other.z * z2z2)
        s2 = other.y * (self.z * z1z1)

        if u1 == u2 and s1 == s2:
            return self.dbl()
        return self._add_core(other, z1z1, z2z2, u1, u2, s1, s2)

    def _add_core(self, other: G2, z1z1: Fq2, z2z2: Fq2, u1: Fq2, u2: Fq2,
                  s1: Fq2, s2: Fq2) -> G2:
        h = u2 - u1
        s2_minus_s1 = s2 - s1
        i = (h + h).squared()
        j = h * i
        r = s2_minus_s1 + s2_minus_s1
        v = u1 * i
        x3 = r.squared() - j - (v + v)
        s1_j = s1 * j
        y3 = r * (v - x3) - (s1_j + s1_j)
        z3 = ((self.z + other.z).squared() - z1z1 - z2z2) * h
        return G2(x3, y3, z3)

    def __neg__(self) -> G2:
        return G2(self.x, -self.y, self.z)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, G2):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar: Any) -> Any:
        if isinstance(scalar, PrimeField):
            scalar = int(scalar)
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        if scalar < 0:
            return (-self) * (-scalar)
        result = G2.zero()
        found_one = False
        for bit in bin(scalar)[2:]:
            if found_one:
                result = result.dbl()
            if bit == "1":
                found_one = True
                result = result + self
        return result

    def __rmul__(self, scalar: Any) -> Any:
        return self.__mul__(scalar)

    def add(self, other: G2) -> G2:
        """Addition that detects doubling by comparing the points first."""
        if self.is_zero():
            return other
        if other.is_zero():
            return self
        if self == other:
            return self.dbl()
        z1z1 = self.z.squared()
        z2z2 = other.z.squared()
        u1 = self.x * z2z2
        u2 = other.x * z1z1
        s1 = self.y * other.z * z2z2
        s2 = other.y * self.z * z1z1
        return self._add_core(other, z1z1, z2z2, u1, u2, s1, s2)

    def mixed_add(self, other: G2) -> G2:
        """Addition where the other point is special (affine)."""
        if self.is_zero():
            return other
        if other.is_zero():
            return self
        if not other.is_special():
            raise ValueError("mixed_add requires a point with Z = 1")

        z1z1 = self.z.squared()
        u1 = self.x
        u2 = other.x * z1z1
        z1_cubed = self.z * z1z1
        s1 = self.y
        s2 = other.y * z1_cubed

        if u1 == u2 and s1 == s2:
            return self.dbl()

        h = u2 - self.x
        hh = h.squared()
        i = hh + hh
        i = i + i
        j = h * i
        r = s2 - self.y
        r = r + r
        v = self.x * i
        x3 = r.squared() - j - v - v
        y1_j = self.y * j
        y3 = r * (v - x3) - y1_j - y1_j
        z3 = (self.z + h).squared() - z1z1 - hh
        return G2(x3, y3, z3)

    def dbl(self) -> G2:
        if self.is_zero():
            return self
        a = self.x.squared()
        b = self.y.squared()
        c = b.squared()
        d = (self.x + b).squared() - a - c
        d = d + d
        e = a + a + a
        f = e.squared()
        x3 = f - (d + d)
        eight_c = c + c
        eight_c = eight_c + eight_c
        eight_c = eight_c + eight_c
        y3 = e * (d - x3) - eight_c
        y1z1 = self.y * self.z
        z3 = y1z1 + y1z1
        return G2(x3, y3, z3)

    def mul_by_q(self) -> G2:
        """Apply the untwist-Frobenius-twist endomorphism."""
        return G2(
            TWIST_MUL_BY_Q_X * self.x.frobenius_map(1),
            TWIST_MUL_BY_Q_Y * self.y.frobenius_map(1),
            self.z.frobenius_map(1),
        )

    def is_well_formed(self) -> bool:
        """Check y^2 = x^3 + b' z^6 on the Jacobian coordinates."""
        if self.is_zero():
            return True
        x2 = self.x.squared()
        y2 = self.y.squared()
        z2 = self.z.squared()
        x3 = self.x * x2
        z3 = self.z * z2
        z6 = z3.squared()
        return y2 == x3 + TWIST_COEFF_B * z6

    def serialize(self) -> str:
        """Compressed text form: zero flag, affine X, low bit of affine Y.c0."""
        affine = self.to_affine()
        flag = 1 if affine.is_zero() else 0
        return OUTPUT_SEPARATOR.join((
            str(flag),
            str(affine.x.c0.value),
            str(affine.x.c1.value),
            str(affine.y.c0.value & 1),
        ))

    @classmethod
    def deserialize(cls, text: str) -> G2:
        parts = text.split()
        if len(parts) != 4:
            raise ValueError(f"expected 4 fields, got {len(parts)}")
        flag, x0_text, x1_text, lsb_text = parts
        if flag not in ("0", "1") or lsb_text not in ("0", "1"):
            raise ValueError("malformed G2 point")
        if flag == "1":
            return cls.zero()
        tx = Fq2(Fq(int(x0_text, 10)), Fq(int(x1_text, 10)))
        ty = (tx.squared() * tx + TWIST_COEFF_B).sqrt()
        if (ty.c0.value & 1) != int(lsb_text):
            ty = -ty
        return cls(tx, ty, Fq2.one())

    @classmethod
    def zero(cls) -> G2:
        return cls(Fq2.zero(), Fq2.one(), Fq2.zero())

    @classmethod
    def one(cls) -> G2:
        return cls(
            Fq2(10857046999023057135944570762232829481370756359578518086990519993285655852781,
                11559732032986387107991004021392285783925812861821192530917403151452391805634),
            Fq2(8495653923123431417604973247489272438418190587263600148770280649306958101930,
                4082367875863433681332203403145435568316851327593401208105741076214120093531),
            Fq2.one(),
        )

    @classmethod
    def random_element(cls) -> G2:
        return int(Fr.random_element()) * cls.one()

    @classmethod
    def size_in_bits(cls) -> int:
        return Fq2.size_in_bits() + 1

    @classmethod
    def base_field_char(cls) -> int:
        return Fq.MODULUS

    @classmethod
    def order(cls) -> int:
        return Fr.MODULUS

    @classmethod
    def batch_to_special_all_non_zeros(cls, points: Iterable[G2]) -> list[G2]:
        """Convert non-zero points to affine form sharing one inversion."""
        points = list(points)
        z_inverses = _batch_invert([p.z for p in points])
        result = []
        for point, z_inv in zip(points, z_inverses):
            z2 = z_inv.squared()
            z3 = z_inv * z2
            result.append(cls(point.x * z2, point.y * z3, Fq2.one()))
        return result
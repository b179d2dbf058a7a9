"""The group G1: points of y^2 = x^3 + 3 over Fq, in Jacobian coordinates."""

from __future__ import annotations

from typing import Any, Iterable

from .fields import COEFF_B, Fq, Fr, PrimeField

OUTPUT_SEPARATOR = " "
OUTPUT_NEWLINE = "\n"


def _batch_invert(values: list[Fq]) -> list[Fq]:
    """Invert every element with a single field inversion."""
    prefix: list[Fq] = []
    acc = Fq.one()
    for value in values:
        prefix.append(acc)
        acc = acc * value
    acc_inv = acc.inverse()
    result: list[Fq] = [Fq.zero()] * len(values)
    for position in reversed(range(len(values))):
        result[position] = acc_inv * prefix[position]
        acc_inv = acc_inv * values[position]
    return result


class G1:
    """A point of G1 in Jacobian coordinates (X : Y : Z), affine (X/Z^2, Y/Z^3)."""

    __slots__ = ("x", "y", "z")

    WNAF_WINDOW_TABLE = (11, 24, 60, 127)
    FIXED_BASE_EXP_WINDOW_TABLE = (
        1, 5, 11, 32, 55, 162, 360, 815, 2373, 6978, 7122, 0,
        57818, 0, 169679, 439759, 936073, 0, 4666555, 7580404, 0, 34552892,
    )

    def __init__(self, x: Fq | int = 0, y: Fq | int = 1, z: Fq | int = 0) -> None:
        self.x = Fq(x)
        self.y = Fq(y)
        self.z = Fq(z)

    def __repr__(self) -> str:
        if self.is_zero():
            return "G1(O)"
        affine = self.to_affine()
        return f"G1({affine.x.value}, {affine.y.value})"

    def __hash__(self) -> int:
        affine = self.to_affine()
        return hash(("G1", affine.x.value, affine.y.value, affine.z.value))

    def to_affine(self) -> G1:
        """Return the same point with Z = 1 (or the canonical zero (0 : 1 : 0))."""
        if self.is_zero():
            return G1(Fq.zero(), Fq.one(), Fq.zero())
        z_inv = self.z.inverse()
        z2_inv = z_inv.squared()
        z3_inv = z2_inv * z_inv
        return G1(self.x * z2_inv, self.y * z3_inv, Fq.one())

    def to_special(self) -> G1:
        return self.to_affine()

    def is_special(self) -> bool:
        return self.is_zero() or self.z == Fq.one()

    def is_zero(self) -> bool:
        return self.z.is_zero()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, G1):
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
        if not isinstance(other, G1):
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

    def _add_core(self, other: G1, z1z1: Fq, z2z2: Fq, u1: Fq, u2: Fq,
                  s1: Fq, s2: Fq) -> G1:
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
        return G1(x3, y3, z3)

    def __neg__(self) -> G1:
        return G1(self.x, -self.y, self.z)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, G1):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar: Any) -> Any:
        if isinstance(scalar, PrimeField):
            scalar = int(scalar)
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        if scalar < 0:
            return (-self) * (-scalar)
        result = G1.zero()
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

    def add(self, other: G1) -> G1:
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

    def mixed_add(self, other: G1) -> G1:
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
        return G1(x3, y3, z3)

    def dbl(self) -> G1:
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
        return G1(x3, y3, z3)

    def is_well_formed(self) -> bool:
        """Check y^2 = x^3 + b z^6 on the Jacobian coordinates."""
        if self.is_zero():
            return True
        x2 = self.x.squared()
        y2 = self.y.squared()
        z2 = self.z.squared()
        x3 = self.x * x2
        z3 = self.z * z2
        z6 = z3.squared()
        return y2 == x3 + COEFF_B * z6

    def serialize(self) -> str:
        """Compressed text form: zero flag, affine X, low bit of affine Y."""
        affine = self.to_affine()
        flag = 1 if affine.is_zero() else 0
        return OUTPUT_SEPARATOR.join(
            (str(flag), str(affine.x.value), str(affine.y.value & 1))
        )

    @classmethod
    def deserialize(cls, text: str) -> G1:
        parts = text.split()
        if len(parts) != 3:
            raise ValueError(f"expected 3 fields, got {len(parts)}")
        flag, x_text, lsb_text = parts
        if flag not in ("0", "1") or lsb_text not in ("0", "1"):
            raise ValueError("malformed G1 point")
        if flag == "1":
            return cls.zero()
        tx = Fq(int(x_text, 10))
        ty = (tx.squared() * tx + COEFF_B).sqrt()
        if (ty.value & 1) != int(lsb_text):
            ty = -ty
        return cls(tx, ty, Fq.one())

    @classmethod
    def zero(cls) -> G1:
        return cls(Fq.zero(), Fq.one(), Fq.zero())

    @classmethod
    def one(cls) -> G1:
        return cls(Fq(1), Fq(2), Fq.one())

    @classmethod
    def random_element(cls) -> G1:
        return int(Fr.random_element()) * cls.one()

    @classmethod
    def size_in_bits(cls) -> int:
        return Fq.size_in_bits() + 1

    @classmethod
    def base_field_char(cls) -> int:
        return Fq.MODULUS

    @classmethod
    def order(cls) -> int:
        return Fr.MODULUS

    @classmethod
    def batch_to_special_all_non_zeros(cls, points: Iterable[G1]) -> list[G1]:
        """Convert non-zero points to affine form sharing one inversion."""
        points = list(points)
        z_inverses = _batch_invert([p.z for p in points])
        result = []
        for point, z_inv in zip(points, z_inverses):
            z2 = z_inv.squared()
            z3 = z_inv * z2
            result.append(cls(point.x * z2, point.y * z3, Fq.one()))
        return result


def serialize_points(points: Iterable[G1]) -> str:
    """Serialize a sequence: the count on a line, then one point per line."""
    points = list(points)
    return f"{len(points)}\n" + "".join(p.serialize() + OUTPUT_NEWLINE for p in points)


def deserialize_points(text: str) -> list[G1]:
    tokens = text.split()
    if not tokens:
        raise ValueError("empty input")
    count = int(tokens[0])
    body = tokens[1:]
    if count < 0 or len(body) != 3 * count:
        raise ValueError("point count does not match data")
    return [
        G1.deserialize(OUTPUT_SEPARATOR.join(body[3 * k:3 * k + 3]))
        for k in range(count)
    ]
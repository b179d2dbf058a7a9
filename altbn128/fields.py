"""Finite fields of the alt_bn128 curve: Fr, Fq, Fq2, Fq6 and Fq12."""

from __future__ import annotations

import secrets
from typing import Any


def _power(base: Any, exponent: int) -> Any:
    if exponent < 0:
        raise ValueError("negative exponent")
    result = type(base).one()
    for bit in bin(exponent)[2:]:
        result = result.squared()
        if bit == "1":
            result = result * base
    return result


def _tonelli_shanks(elt: Any, s: int, nqr_to_t: Any, t_minus_1_over_2: int) -> Any:
    one = type(elt).one()
    if elt.is_zero():
        return type(elt).zero()
    if _power(elt, type(elt).EULER) != one:
        raise ValueError("element is not a quadratic residue")
    v = s
    z = nqr_to_t
    w = _power(elt, t_minus_1_over_2)
    x = elt * w
    b = x * w
    while b != one:
        m = 0
        b2m = b
        while b2m != one:
            b2m = b2m.squared()
            m += 1
        w = z
        for _ in range(v - m - 1):
            w = w.squared()
        z = w * w
        b = b * z
        x = x * w
        v = m
    return x


class PrimeField:
    """An element of a prime field; subclasses fix the modulus."""

    MODULUS: int = 0
    NUM_BITS: int = 0
    EULER: int = 0
    S: int = 0
    T: int = 0
    T_MINUS_1_OVER_2: int = 0
    NQR_TO_T: int = 0

    __slots__ = ("value",)

    def __init__(self, value: int | str | PrimeField = 0) -> None:
        if isinstance(value, PrimeField):
            value = value.value
        elif isinstance(value, str):
            value = int(value, 10)
        self.value = value % self.MODULUS

    def _coerce(self, other: Any) -> PrimeField | None:
        if type(other) is type(self):
            return other
        if isinstance(other, int):
            return type(self)(other)
        return None

    def __add__(self, other: Any) -> Any:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return type(self)(self.value + o.value)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return type(self)(self.value - o.value)

    def __mul__(self, other: Any) -> Any:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return type(self)(self.value * o.value)

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __neg__(self) -> PrimeField:
        return type(self)(-self.value)

    def __pow__(self, exponent: int) -> PrimeField:
        if exponent < 0:
            return self.inverse() ** (-exponent)
        return type(self)(pow(self.value, exponent, self.MODULUS))

    def __eq__(self, other: object) -> bool:
        o = self._coerce(other)
        return o is not None and o.value == self.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"

    def __str__(self) -> str:
        return str(self.value)

    def is_zero(self) -> bool:
        return self.value == 0

    def squared(self) -> PrimeField:
        return type(self)(self.value * self.value)

    def inverse(self) -> PrimeField:
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return type(self)(pow(self.value, -1, self.MODULUS))

    def sqrt(self) -> PrimeField:
        """Square root by Tonelli-Shanks; raises ValueError for non-residues."""
        cls = type(self)
        return _tonelli_shanks(self, cls.S, cls(cls.NQR_TO_T), cls.T_MINUS_1_OVER_2)

    @classmethod
    def zero(cls) -> PrimeField:
        return cls(0)

    @classmethod
    def one(cls) -> PrimeField:
        return cls(1)

    @classmethod
    def random_element(cls) -> PrimeField:
        return cls(secrets.randbelow(cls.MODULUS))

    @classmethod
    def size_in_bits(cls) -> int:
        return cls.NUM_BITS


class Fr(PrimeField):
    """Scalar field of the curve."""

    __slots__ = ()
    MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617
    NUM_BITS = 254
    EULER = 10944121435919637611123202872628637544274182200208017171849102093287904247808
    S = 28
    T = 81540058820840996586704275553141814055101440848469862132140264610111
    T_MINUS_1_OVER_2 = 40770029410420498293352137776570907027550720424234931066070132305055
    MULTIPLICATIVE_GENERATOR = 5
    ROOT_OF_UNITY = 19103219067921713944291392827692070036145651957329286315305642004821462161904
    NQR = 5
    NQR_TO_T = 19103219067921713944291392827692070036145651957329286315305642004821462161904


class Fq(PrimeField):
    """Base field of the curve."""

    __slots__ = ()
    MODULUS = 21888242871839275222246405745257275088696311157297823662689037894645226208583
    NUM_BITS = 254
    EULER = 10944121435919637611123202872628637544348155578648911831344518947322613104291
    S = 1
    T = 10944121435919637611123202872628637544348155578648911831344518947322613104291
    T_MINUS_1_OVER_2 = 5472060717959818805561601436314318772174077789324455915672259473661306552145
    MULTIPLICATIVE_GENERATOR = 3
    ROOT_OF_UNITY = 21888242871839275222246405745257275088696311157297823662689037894645226208582
    NQR = 3
    NQR_TO_T = 21888242871839275222246405745257275088696311157297823662689037894645226208582


class Fq2:
    """Quadratic extension Fq[u]/(u^2 + 1)."""

    __slots__ = ("c0", "c1")

    NON_RESIDUE = Fq(21888242871839275222246405745257275088696311157297823662689037894645226208582)
    EULER = 239547588008311421220994022608339370399626158265550411218223901127035046843189118723920525909718935985594116157406550130918127817069793474323196511433944
    S = 4
    T = 29943448501038927652624252826042421299953269783193801402277987640879380855398639840490065738714866998199264519675818766364765977133724184290399563929243
    T_MINUS_1_OVER_2 = 14971724250519463826312126413021210649976634891596900701138993820439690427699319920245032869357433499099632259837909383182382988566862092145199781964621
    FROBENIUS_COEFFS_C1: tuple[Fq, ...] = (
        Fq(1),
        Fq(21888242871839275222246405745257275088696311157297823662689037894645226208582),
    )

    def __init__(self, c0: Fq | int = 0, c1: Fq | int = 0) -> None:
        self.c0 = Fq(c0)
        self.c1 = Fq(c1)

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, Fq2):
            return NotImplemented
        return Fq2(self.c0 + other.c0, self.c1 + other.c1)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, Fq2):
            return NotImplemented
        return Fq2(self.c0 - other.c0, self.c1 - other.c1)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, (Fq, int)):
            return Fq2(self.c0 * other, self.c1 * other)
        if not isinstance(other, Fq2):
            return NotImplemented
        a_a = self.c0 * other.c0
        b_b = self.c1 * other.c1
        return Fq2(
            a_a + self.NON_RESIDUE * b_b,
            (self.c0 + self.c1) * (other.c0 + other.c1) - a_a - b_b,
        )

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, (Fq, int)):
            return Fq2(self.c0 * other, self.c1 * other)
        return NotImplemented

    def __neg__(self) -> Fq2:
        return Fq2(-self.c0, -self.c1)

    def __pow__(self, exponent: int) -> Fq2:
        return _power(self, exponent)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Fq2) and self.c0 == other.c0 and self.c1 == other.c1

    def __hash__(self) -> int:
        return hash((self.c0.value, self.c1.value))

    def __repr__(self) -> str:
        return f"Fq2({self.c0.value}, {self.c1.value})"

    def __str__(self) -> str:
        return f"{self.c0} {self.c1}"

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero()

    def squared(self) -> Fq2:
        return self * self

    def inverse(self) -> Fq2:
        t0 = self.c0.squared()
        t1 = self.c1.squared()
        t2 = t0 - self.NON_RESIDUE * t1
        t3 = t2.inverse()
        return Fq2(self.c0 * t3, -(self.c1 * t3))

    def sqrt(self) -> Fq2:
        """Square root by Tonelli-Shanks; raises ValueError for non-residues."""
        return _tonelli_shanks(self, self.S, FQ2_NQR_TO_T, self.T_MINUS_1_OVER_2)

    def frobenius_map(self, power: int) -> Fq2:
        return Fq2(self.c0, self.FROBENIUS_COEFFS_C1[power % 2] * self.c1)

    @classmethod
    def zero(cls) -> Fq2:
        return cls(0, 0)

    @classmethod
    def one(cls) -> Fq2:
        return cls(1, 0)

    @classmethod
    def random_element(cls) -> Fq2:
        return cls(Fq.random_element(), Fq.random_element())

    @classmethod
    def size_in_bits(cls) -> int:
        return 2 * Fq.size_in_bits()


FQ2_NQR = Fq2(2, 1)
FQ2_NQR_TO_T = Fq2(
    5033503716262624267312492558379982687175200734934877598599011485707452665730,
    314498342015008975724433667930697407966947188435857772134235984660852259084,
)


def _fq2(a: int, b: int = 0) -> Fq2:
    return Fq2(a, b)


class Fq6:
    """Cubic extension Fq2[v]/(v^3 - xi) with xi = 9 + u."""

    __slots__ = ("c0", "c1", "c2")

    NON_RESIDUE = _fq2(9, 1)
    FROBENIUS_COEFFS_C1 = (
        _fq2(1, 0),
        _fq2(21575463638280843010398324269430826099269044274347216827212613867836435027261,
             10307601595873709700152284273816112264069230130616436755625194854815875713954),
        _fq2(21888242871839275220042445260109153167277707414472061641714758635765020556616, 0),
        _fq2(3772000881919853776433695186713858239009073593817195771773381919316419345261,
             2236595495967245188281701248203181795121068902605861227855261137820944008926),
        _fq2(2203960485148121921418603742825762020974279258880205651966, 0),
        _fq2(18429021223477853657660792034369865839114504446431234726392080002137598044644,
             9344045779998320333812420223237981029506012124075525679208581902008406485703),
    )
    FROBENIUS_COEFFS_C2 = (
        _fq2(1, 0),
        _fq2(2581911344467009335267311115468803099551665605076196740867805258568234346338,
             19937756971775647987995932169929341994314640652964949448313374472400716661030),
        _fq2(2203960485148121921418603742825762020974279258880205651966, 0),
        _fq2(5324479202449903542726783395506214481928257762400643279780343368557297135718,
             16208900380737693084919495127334387981393726419856888799917914180988844123039),
        _fq2(21888242871839275220042445260109153167277707414472061641714758635765020556616, 0),
        _fq2(13981852324922362344252311234282257507216387789820983642040889267519694726527,
             7629828391165209371577384193250820201684255241773809077146787135900891633097),
    )

    def __init__(self, c0: Fq2, c1: Fq2, c2: Fq2) -> None:
        self.c0 = c0
        self.c1 = c1
        self.c2 = c2

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, Fq6):
            return NotImplemented
        return Fq6(self.c0 + other.c0, self.c1 + other.c1, self.c2 + other.c2)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, Fq6):
            return NotImplemented
        return Fq6(self.c0 - other.c0, self.c1 - other.c1, self.c2 - other.c2)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, (Fq2, Fq, int)):
            return Fq6(self.c0 * other, self.c1 * other, self.c2 * other)
        if not isinstance(other, Fq6):
            return NotImplemented
        a0, a1, a2 = self.c0, self.c1, self.c2
        b0, b1, b2 = other.c0, other.c1, other.c2
        a_a = a0 * b0
        b_b = a1 * b1
        c_c = a2 * b2
        nr = self.NON_RESIDUE
        return Fq6(
            a_a + nr * ((a1 + a2) * (b1 + b2) - b_b - c_c),
            (a0 + a1) * (b0 + b1) - a_a - b_b + nr * c_c,
            (a0 + a2) * (b0 + b2) - a_a + b_b - c_c,
        )

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, (Fq2, Fq, int)):
            return Fq6(other * self.c0, other * self.c1, other * self.c2)
        return NotImplemented

    def __neg__(self) -> Fq6:
        return Fq6(-self.c0, -self.c1, -self.c2)

    def __pow__(self, exponent: int) -> Fq6:
        return _power(self, exponent)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Fq6)
            and self.c0 == other.c0
            and self.c1 == other.c1
            and self.c2 == other.c2
        )

    def __hash__(self) -> int:
        return hash((self.c0, self.c1, self.c2))

    def __repr__(self) -> str:
        return f"Fq6({self.c0!r}, {self.c1!r}, {self.c2!r})"

    def __str__(self) -> str:
        return f"{self.c0} {self.c1} {self.c2}"

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero() and self.c2.is_zero()

    def squared(self) -> Fq6:
        return self * self

    def inverse(self) -> Fq6:
        a0, a1, a2 = self.c0, self.c1, self.c2
        nr = self.NON_RESIDUE
        t0 = a0.squared()
        t1 = a1.squared()
        t2 = a2.squared()
        t3 = a0 * a1
        t4 = a0 * a2
        t5 = a1 * a2
        c0 = t0 - nr * t5
        c1 = nr * t2 - t3
        c2 = t1 - t4
        t6 = (a0 * c0 + nr * (a2 * c1 + a1 * c2)).inverse()
        return Fq6(t6 * c0, t6 * c1, t6 * c2)

    def frobenius_map(self, power: int) -> Fq6:
        return Fq6(
            self.c0.frobenius_map(power),
            self.FROBENIUS_COEFFS_C1[power % 6] * self.c1.frobenius_map(power),
            self.FROBENIUS_COEFFS_C2[power % 6] * self.c2.frobenius_map(power),
        )

    @staticmethod
    def mul_by_non_residue(elt: Fq2) -> Fq2:
        return Fq6.NON_RESIDUE * elt

    @classmethod
    def zero(cls) -> Fq6:
        return cls(Fq2.zero(), Fq2.zero(), Fq2.zero())

    @classmethod
    def one(cls) -> Fq6:
        return cls(Fq2.one(), Fq2.zero(), Fq2.zero())

    @classmethod
    def random_element(cls) -> Fq6:
        return cls(Fq2.random_element(), Fq2.random_element(), Fq2.random_element())


class Fq12:
    """Quadratic extension Fq6[w]/(w^2 - v); the pairing target group lives here."""

    __slots__ = ("c0", "c1")

    NON_RESIDUE = _fq2(9, 1)
    FROBENIUS_COEFFS_C1 = (
        _fq2(1, 0),
        _fq2(8376118865763821496583973867626364092589906065868298776909617916018768340080,
             16469823323077808223889137241176536799009286646108169935659301613961712198316),
        _fq2(21888242871839275220042445260109153167277707414472061641714758635765020556617, 0),
        _fq2(11697423496358154304825782922584725312912383441159505038794027105778954184319,
             303847389135065887422783454877609941456349188919719272345083954437860409601),
        _fq2(21888242871839275220042445260109153167277707414472061641714758635765020556616, 0),
        _fq2(3321304630594332808241809054958361220322477375291206261884409189760185844239,
             5722266937896532885780051958958348231143373700109372999374820235121374419868),
        _fq2(21888242871839275222246405745257275088696311157297823662689037894645226208582, 0),
        _fq2(13512124006075453725662431877630910996106405091429524885779419978626457868503,
             5418419548761466998357268504080738289687024511189653727029736280683514010267),
        _fq2(2203960485148121921418603742825762020974279258880205651966, 0),
        _fq2(10190819375481120917420622822672549775783927716138318623895010788866272024264,
             21584395482704209334823622290379665147239961968378104390343953940207365798982),
        _fq2(2203960485148121921418603742825762020974279258880205651967, 0),
        _fq2(18566938241244942414004596690298913868373833782006617400804628704885040364344,
             16165975933942742336466353786298926857552937457188450663314217659523851788715),
    )

    def __init__(self, c0: Fq6, c1: Fq6) -> None:
        self.c0 = c0
        self.c1 = c1

    @classmethod
    def _mul_by_non_residue(cls, elt: Fq6) -> Fq6:
        return Fq6(cls.NON_RESIDUE * elt.c2, elt.c0, elt.c1)

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, Fq12):
            return NotImplemented
        return Fq12(self.c0 + other.c0, self.c1 + other.c1)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, Fq12):
            return NotImplemented
        return Fq12(self.c0 - other.c0, self.c1 - other.c1)

    def __neg__(self) -> Fq12:
        return Fq12(-self.c0, -self.c1)

    def __mul__(self, other: Any) -> Any:
        if not isinstance(other, Fq12):
            return NotImplemented
        a_a = self.c0 * other.c0
        b_b = self.c1 * other.c1
        return Fq12(
            a_a + self._mul_by_non_residue(b_b),
            (self.c0 + self.c1) * (other.c0 + other.c1) - a_a - b_b,
        )

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Fq12) and self.c0 == other.c0 and self.c1 == other.c1

    def __hash__(self) -> int:
        return hash((self.c0, self.c1))

    def __repr__(self) -> str:
        return f"Fq12({self.c0!r}, {self.c1!r})"

    def __str__(self) -> str:
        return f"{self.c0} {self.c1}"

    def __pow__(self, exponent: int) -> Fq12:
        return _power(self, exponent)

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero()

    def squared(self) -> Fq12:
        return self * self

    def inverse(self) -> Fq12:
        t0 = self.c0.squared() - self._mul_by_non_residue(self.c1.squared())
        t1 = t0.inverse()
        return Fq12(self.c0 * t1, -(self.c1 * t1))

    def frobenius_map(self, power: int) -> Fq12:
        return Fq12(
            self.c0.frobenius_map(power),
            self.FROBENIUS_COEFFS_C1[power % 12] * self.c1.frobenius_map(power),
        )

    def unitary_inverse(self) -> Fq12:
        return Fq12(self.c0, -self.c1)

    def cyclotomic_squared(self) -> Fq12:
        return self.squared()

    def cyclotomic_exp(self, exponent: int) -> Fq12:
        result = Fq12.one()
        for bit in bin(exponent)[2:]:
            result = result.cyclotomic_squared()
            if bit == "1":
                result = result * self
        return result

    def mul_by_024(self, ell_0: Fq2, ell_vw: Fq2, ell_vv: Fq2) -> Fq12:
        """Multiply by the sparse element with ell_0, ell_vv in c0 and ell_vw in c1."""
        zero = Fq2.zero()
        sparse = Fq12(Fq6(ell_0, zero, ell_vv), Fq6(zero, ell_vw, zero))
        return self * sparse

    @classmethod
    def zero(cls) -> Fq12:
        return cls(Fq6.zero(), Fq6.zero())

    @classmethod
    def one(cls) -> Fq12:
        return cls(Fq6.one(), Fq6.zero())

    @classmethod
    def random_element(cls) -> Fq12:
        return cls(Fq6.random_element(), Fq6.random_element())


GT = Fq12

# Curve E/Fq: y^2 = x^3 + b, and its twist E'/Fq2: y^2 = x^3 + b/xi.
COEFF_B = Fq(3)
TWIST = Fq2(9, 1)
TWIST_COEFF_B = COEFF_B * TWIST.inverse()
TWIST_MUL_BY_B_C0 = COEFF_B * Fq2.NON_RESIDUE
TWIST_MUL_BY_B_C1 = COEFF_B * Fq2.NON_RESIDUE
TWIST_MUL_BY_Q_X = Fq2(
    21575463638280843010398324269430826099269044274347216827212613867836435027261,
    10307601595873709700152284273816112264069230130616436755625194854815875713954,
)
TWIST_MUL_BY_Q_Y = Fq2(
    2821565182194536844548159561693502659359617185244120367078079554186484126554,
    3505843767911556378687030309984248845540243509899259641013678093033130930403,
)

# Pairing parameters.
ATE_LOOP_COUNT = 29793968203157093288
ATE_IS_LOOP_COUNT_NEG = False
FINAL_EXPONENT = (Fq.MODULUS ** 12 - 1) // Fr.MODULUS
FINAL_EXPONENT_Z = 4965661367192848881
FINAL_EXPONENT_IS_Z_NEG = False
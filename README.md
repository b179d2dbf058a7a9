# altbn128

Pure-Python arithmetic for the alt_bn128 (also known as BN254) Barreto–Naehrig
curve, the pairing-friendly curve used by many zk-SNARK systems.

## Modules

- `altbn128.fields`: the prime fields `Fq` (base field) and `Fr` (scalar
  field), both subclasses of `PrimeField`, and the tower extensions `Fq2`,
  `Fq6` and `Fq12`. Elements support `+`, `-`, `*`, `**`, `inverse()` and
  `squared()`. `Fq` and `Fq2` have `sqrt()`, which raises `ValueError` for a
  non-residue. The extensions have `frobenius_map(power)`. `Fq12` also has
  `unitary_inverse()`, `cyclotomic_exp()` and `mul_by_024()`. The module also
  holds the curve constants (`COEFF_B`, `TWIST`, `TWIST_COEFF_B`, …) and the
  pairing parameters (`ATE_LOOP_COUNT`, `FINAL_EXPONENT_Z`, …).
- `altbn128.g1`: `G1`, points of y² = x³ + 3 over `Fq` in Jacobian coordinates.
  It supports `+`, `-`, negation, multiplication by an `int` or a field
  element, `dbl()`, `mixed_add()`, `to_affine()`, `is_well_formed()` and
  `batch_to_special_all_non_zeros()`. Points have a compressed text form:
  `serialize()` / `G1.deserialize()`. Lists of points use
  `serialize_points()` / `deserialize_points()`.
- `altbn128.g2`: `G2`, points of the sextic twist over `Fq2`. It has the same
  interface as `G1`, plus `mul_by_q()` and `mul_by_b()`.
- `altbn128.pairing`: the optimal ate pairing. It covers precomputation
  (`precompute_g1`, `precompute_g2`, which return `AteG1Precomp` and
  `AteG2Precomp`), the Miller loops (`miller_loop`, `double_miller_loop`),
  `final_exponentiation`, `pairing` and `reduced_pairing`. The precomputation
  records can be serialized to text and read back.
- `altbn128.pp`: `AltBn128PP`, which bundles the pairing operations and the
  curve's types (`G1_TYPE`, `G2_TYPE`, `GT_TYPE`, …) behind one class.

## Installation

```
pip install .
```

Running the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from altbn128.fields import Fr
from altbn128.g1 import G1
from altbn128.g2 import G2
from altbn128.pp import AltBn128PP

a = Fr.random_element()
b = Fr.random_element()

P = G1.one()
Q = G2.one()

# Bilinearity: e(aP, bQ) == e(P, Q) ** (a * b)
lhs = AltBn128PP.reduced_pairing(a * P, b * Q)
rhs = AltBn128PP.reduced_pairing(P, Q) ** int(a * b)
assert lhs == rhs

# Points round-trip through their compressed text form
text = (a * P).serialize()
assert G1.deserialize(text) == a * P
```

Multiplying by the group order gives the identity:

```python
assert G1.order() * G1.one() == G1.zero()
```

## Limitations

- All arithmetic uses plain Python integers. A reduced pairing takes on the
  order of seconds.
- The arithmetic is not constant-time, so it is not suitable where timing
  side channels matter.
- This is a library only. It has no command-line tool, and it offers no
  hashing to the curve and no binary point encoding.
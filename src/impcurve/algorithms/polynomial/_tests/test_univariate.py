from fractions import Fraction

import numpy as np
import pytest

from impcurve.algorithms.polynomial.univariate import (Polynomial,
                                                       parse_polynomial)
from impcurve.algorithms.utils.exceptions import RangeError

SAMPLES = [-1.5, -0.3, 0.0, 0.7, 2.0]


def _random_poly(rng, max_deg=5):
    deg = int(rng.integers(0, max_deg + 1))
    return Polynomial(rng.uniform(-2.0, 2.0, deg + 1))


def _horner(coeffs, x):
    return sum(c * x**i for i, c in enumerate(coeffs))


@pytest.mark.parametrize("seed", range(5))
def test_arithmetic_matches_evaluation(seed):
    rng = np.random.default_rng(seed)
    p, q = _random_poly(rng), _random_poly(rng)
    for x in SAMPLES:
        assert (p + q)(x) == pytest.approx(p(x) + q(x))
        assert (p - q)(x) == pytest.approx(p(x) - q(x))
        assert (p * q)(x) == pytest.approx(p(x) * q(x))
        assert (-p)(x) == pytest.approx(-p(x))


def test_horner_evaluation():
    p = Polynomial([1.0, -2.0, 0.5, 3.0])
    for x in SAMPLES:
        assert p(x) == pytest.approx(_horner([1.0, -2.0, 0.5, 3.0], x))


def test_composition():
    p = Polynomial([1.0, 0.0, 2.0])
    q = Polynomial([0.0, 3.0, 1.0])
    pq = p(q)
    assert isinstance(pq, Polynomial)
    for x in SAMPLES:
        assert pq(x) == pytest.approx(p(q(x)))


def test_scalar_operators():
    p = Polynomial([1.0, 2.0, 3.0])
    assert list(p + 2.0) == [3.0, 2.0, 3.0]
    assert list(2.0 - p) == [1.0, -2.0, -3.0]
    assert list(p * 2.0) == [2.0, 4.0, 6.0]
    assert list(p / 2.0) == [0.5, 1.0, 1.5]


def test_shift_multiplies_by_power():
    p = Polynomial([1.0, 2.0])
    s = p << 2
    assert list(s) == [0.0, 0.0, 1.0, 2.0]
    for x in SAMPLES:
        assert s(x) == pytest.approx(x**2 * p(x))


def test_degrees_and_normalize():
    p = Polynomial([1.0, 2.0, 0.0, 0.0])
    assert p.max_degree() == 3
    assert p.real_degree() == 1
    p.normalize()
    assert p.max_degree() == p.real_degree() == 1
    p.normalize()
    assert list(p) == [1.0, 2.0]

    z = Polynomial([0.0, 0.0])
    assert z.real_degree() == 0
    assert z.is_zero()
    z.normalize()
    assert len(z) == 1


@pytest.mark.parametrize("seed", range(3))
def test_product_degree_normalizes(seed):
    rng = np.random.default_rng(seed)
    p = _random_poly(rng) * Polynomial([0.0, 0.0, 0.0])
    p.normalize()
    assert p.real_degree() == p.max_degree() == 0


def test_safe_get_does_not_mutate():
    p = Polynomial([1.0, 2.0])
    assert p.coefficient(10) == 0.0
    assert p.max_degree() == 1


def test_safe_set_grows_storage():
    p = Polynomial([1.0])
    p.set_coefficient(4, 7.0)
    assert p.coefficient(4) == 7.0
    assert p.max_degree() == 4
    assert list(p) == [1.0, 0.0, 0.0, 0.0, 7.0]

    p.set_coefficient(9, 0.0)
    assert p.max_degree() == 4


def test_safe_access_rejects_negative_exponent():
    p = Polynomial([1.0, 2.0, 3.0])
    with pytest.raises(RangeError):
        p.coefficient(-1)
    with pytest.raises(RangeError):
        p.set_coefficient(-1, 5.0)
    assert list(p) == [1.0, 2.0, 3.0]


def test_set_max_degree():
    p = Polynomial([1.0, 2.0, 3.0])
    p.set_max_degree(5)
    assert p.max_degree() == 5 and p.real_degree() == 2
    p.set_max_degree(0)
    assert list(p) == [1.0]
    with pytest.raises(RangeError):
        p.set_max_degree(-1)


def test_equality_ignores_trailing_zeros():
    assert Polynomial([1.0, 2.0]) == Polynomial([1.0, 2.0, 0.0])
    assert Polynomial([1.0, 2.0]) != Polynomial([1.0, 3.0])
    assert Polynomial([4.0, 0.0]) == 4.0


def test_exact_coefficients():
    p = Polynomial([Fraction(1, 2), Fraction(1, 3)])
    q = p * p
    assert list(q) == [Fraction(1, 4), Fraction(1, 3), Fraction(1, 9)]
    assert q(Fraction(3)) == Fraction(9, 4)


def test_nested_rank():
    inner = Polynomial([1.0, 1.0])
    p = Polynomial([inner, Polynomial([0.0, 2.0])])
    assert p.rank == 2
    assert p.coefficient(5).rank == 1
    assert p.coefficient(5).is_zero()


def test_mixed_rank_adds_to_constant_term():
    p = Polynomial([Polynomial([1.0]), Polynomial([2.0])])
    r = p + Polynomial([0.0, 5.0])
    assert r[0] == Polynomial([1.0, 5.0])
    assert r[1] == Polynomial([2.0])
    q = Polynomial([1.0])
    with pytest.raises(RangeError):
        q += p


def test_text_round_trip():
    p = Polynomial([1.5, -2.0, 0.25])
    assert parse_polynomial(str(p)) == p
    assert str(p) == "{1.5, -2.0, 0.25}"

    nested = Polynomial([Polynomial([1.0, 2.0]), Polynomial([0.0, 3.0])])
    back = parse_polynomial(str(nested))
    assert back.rank == 2
    assert back == nested


@pytest.mark.parametrize("text", ["1.0", "{1.0", "{1.0, {2.0}}", "{1.0 2.0}", ""])
def test_malformed_text(text):
    with pytest.raises(RangeError):
        parse_polynomial(text)

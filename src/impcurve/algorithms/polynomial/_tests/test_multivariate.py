import numpy as np
import pytest

from impcurve.algorithms.polynomial.multiindex import MultiIndex
from impcurve.algorithms.polynomial.multivariate import MultiPoly
from impcurve.algorithms.polynomial.univariate import Polynomial
from impcurve.algorithms.utils.exceptions import RangeError


def _xy():
    return MultiPoly.variable(2, 0), MultiPoly.variable(2, 1)


def _random_multipoly(rng, rank, max_deg=3):
    terms = {}
    for _ in range(6):
        I = tuple(int(k) for k in rng.integers(0, max_deg + 1, rank))
        terms[I] = float(rng.integers(-3, 4))
    return MultiPoly.from_terms(rank, terms)


def test_variables_and_evaluation():
    x, y = _xy()
    F = y - x * x
    assert F(2.0, 4.0) == 0.0
    assert F((3.0, 1.0)) == pytest.approx(-8.0)
    assert F.rank == 2


def test_lex_degree():
    x, y = _xy()
    F = x * x * y + y * y * y + 1.0
    assert F.degree() == MultiIndex([2, 1])
    assert F.leading_coefficient() == 1.0
    assert F.trailing_coefficient() == 1.0
    assert MultiPoly(3).degree() == (0, 0, 0)


@pytest.mark.parametrize("ordering", ["ilex", "max_lex"])
def test_other_orderings_not_supported(ordering):
    with pytest.raises(NotImplementedError):
        MultiPoly.variable(2, 0).degree(ordering)


def test_unknown_ordering():
    with pytest.raises(ValueError):
        MultiPoly(2).degree("grevlex")


def test_safe_coefficient_access_grows_storage():
    p = MultiPoly(3)
    p.set_coefficient((2, 1, 3), 5.0)
    assert p.coefficient((2, 1, 3)) == 5.0
    assert p[(2, 1, 3)] == 5.0
    assert p.coefficient((0, 0, 0)) == 0.0
    assert p.coefficient((1, 0, 2)) == 0.0

    assert p.coefficient((7, 7, 7)) == 0.0
    assert p.poly.max_degree() == 2

    p.set_coefficient((0, 4, 0), -1.0)
    assert p.coefficient((0, 4, 0)) == -1.0
    assert p.coefficient((2, 1, 3)) == 5.0
    assert p.as_dict() == {(0, 4, 0): -1.0, (2, 1, 3): 5.0}


def test_multi_index_length_checked():
    p = MultiPoly(3)
    with pytest.raises(RangeError):
        p.coefficient((1, 2))
    with pytest.raises(RangeError):
        p.set_coefficient((1, 2, 3, 4), 1.0)
    with pytest.raises(RangeError):
        p[(0, 0)]
    with pytest.raises(RangeError):
        p(1.0, 2.0)
    with pytest.raises(RangeError):
        MultiPoly.monomial(2, 1.0, (1, 1, 1))


def test_constructor_checks_rank():
    with pytest.raises(RangeError):
        MultiPoly(2, Polynomial([1.0]))
    p = Polynomial([Polynomial([1.0, 2.0])])
    m = MultiPoly(2, p)
    p[0][0] = 9.0
    assert m.coefficient((0, 0)) == 1.0


@pytest.mark.parametrize("seed", range(4))
def test_arithmetic_matches_evaluation(seed):
    rng = np.random.default_rng(seed)
    p = _random_multipoly(rng, 3)
    q = _random_multipoly(rng, 3)
    X = (0.5, -1.25, 2.0)
    assert (p + q)(X) == pytest.approx(p(X) + q(X))
    assert (p - q)(X) == pytest.approx(p(X) - q(X))
    assert (p * q)(X) == pytest.approx(p(X) * q(X))
    assert (p * 3.0 - 1.0)(X) == pytest.approx(3.0 * p(X) - 1.0)
    assert (p / 4.0)(X) == pytest.approx(p(X) / 4.0)


def test_mixed_rank_broadcasts_into_last_indeterminates():
    x, _ = _xy()
    p2 = x + 1.0
    t = MultiPoly.variable(1, 0)

    s = p2 + t
    assert s.rank == 2
    assert s(2.0, 3.0) == pytest.approx(6.0)
    assert (t + p2) == s
    assert (p2 * t)(2.0, 3.0) == pytest.approx(9.0)
    assert (t - p2)(2.0, 3.0) == pytest.approx(0.0)

    with pytest.raises(RangeError):
        t += p2


def test_embed_places_leading_exponents():
    t = MultiPoly.variable(1, 0)
    e = MultiPoly.embed(t, 3, (1, 2))
    assert e.rank == 3
    assert e.as_dict() == {(1, 2, 1): 1.0}
    assert e(2.0, 3.0, 5.0) == pytest.approx(90.0)
    assert MultiPoly.embed(2.5, 2).as_dict() == {(0, 0): 2.5}
    with pytest.raises(RangeError):
        MultiPoly.embed(MultiPoly(3), 2)


def test_shift_by_multi_index():
    x, y = _xy()
    s = (x * y) << (1, 2)
    assert s.as_dict() == {(2, 3): 1.0}
    s <<= (0, 1)
    assert s.as_dict() == {(2, 4): 1.0}


def test_division_only_by_scalars():
    x, y = _xy()
    with pytest.raises(TypeError):
        x / y


def test_vectorised_evaluation():
    x, y = _xy()
    F = y - x * x
    xs = np.linspace(-1.0, 1.0, 5)
    np.testing.assert_allclose(F(xs, xs**2), np.zeros(5), atol=1e-15)
    np.testing.assert_allclose(F(np.array([xs, xs])), xs - xs**2)


def test_substitution_with_polynomials():
    x, y = _xy()
    F = x * x + y
    t = Polynomial([0.0, 1.0])
    r = F(t, t * t)
    assert isinstance(r, Polynomial)
    assert r == Polynomial([0.0, 0.0, 2.0])


def test_normalize_is_recursive():
    p = MultiPoly(2)
    p.set_coefficient((3, 3), 1.0)
    p.set_coefficient((1, 0), 2.0)
    p.set_coefficient((3, 3), 0.0)
    p.normalize()
    assert p.poly.max_degree() == 1
    assert p.poly[1].max_degree() == 0
    p.normalize()
    assert p.as_dict() == {(1, 0): 2.0}


def test_sub_poly_and_select():
    rng = np.random.default_rng(7)
    p = _random_multipoly(rng, 3)
    s = p.sub_poly(1)
    assert s.rank == 2
    assert s.as_dict() == {I[1:]: c for I, c in p.as_dict().items() if I[0] == 1}
    assert p.sub_poly(50).is_zero()

    sel = p.select((1,))
    assert sel == s
    assert p.select((1, 2)).rank == 1
    with pytest.raises(RangeError):
        p.select((1, 2, 3))


def test_degree_along_multi_index():
    p = MultiPoly.from_terms(2, {(2, 1): 1.0, (0, 3): 1.0})
    ok, D = p.real_degree((2, 0))
    assert ok and D == (2, 1)
    ok, D = p.real_degree((0, 5))
    assert not ok and D == (2, 3)
    ok, _ = p.max_degree((3, 0))
    assert not ok


def test_for_each_scalar_coefficients():
    p = MultiPoly.from_terms(2, {(0, 1): 1.0, (2, 0): -3.0})
    p.for_each(0, lambda c: 2.0 * c)
    assert p.as_dict() == {(0, 1): 2.0, (2, 0): -6.0}


def test_for_each_sub_polynomials():
    p = MultiPoly.from_terms(2, {(0, 1): 1.0, (1, 0): 1.0})
    p.for_each(1, lambda s: s * s)
    assert p.as_dict() == {(0, 2): 1.0, (1, 0): 1.0}


def test_dense_round_trip():
    grid = np.array([[0.0, 1.0], [2.0, 0.0], [0.0, -3.0]])
    p = MultiPoly.from_dense(grid)
    assert p.as_dict() == {(0, 1): 1.0, (1, 0): 2.0, (2, 1): -3.0}
    np.testing.assert_array_equal(p.to_dense(), grid)
    assert p.to_dense(shape=(4, 3)).shape == (4, 3)
    with pytest.raises(RangeError):
        p.to_dense(shape=(2, 2))


def test_text_round_trip():
    rng = np.random.default_rng(3)
    p = _random_multipoly(rng, 3)
    assert MultiPoly.from_string(str(p)) == p
    with pytest.raises(RangeError):
        MultiPoly.from_string(str(p), rank=2)

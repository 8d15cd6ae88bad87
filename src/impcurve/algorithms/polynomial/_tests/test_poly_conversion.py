import pytest
import sympy as sp

from impcurve.algorithms.polynomial.conversion import (multipoly2sympy,
                                                       sympy2multipoly)
from impcurve.algorithms.polynomial.multivariate import MultiPoly

x, y = sp.symbols("x y")


def test_sympy2multipoly_terms():
    expr = 3 * x**2 * y - y + sp.Rational(1, 2)
    p = sympy2multipoly(expr, [x, y])
    assert p.rank == 2
    assert p.as_dict() == {(0, 0): 0.5, (0, 1): -1.0, (2, 1): 3.0}


def test_round_trip_through_sympy():
    expr = x**3 + x**2 - y**2
    p = sympy2multipoly(expr, [x, y])
    back = multipoly2sympy(p, [x, y])
    assert float((back - expr).subs({x: 1.3, y: -0.7})) == pytest.approx(0.0)
    assert sp.Poly(back, x, y).degree(x) == 3


def test_zero_expression():
    p = sympy2multipoly(sp.Integer(0), [x, y])
    assert p.is_zero()
    assert multipoly2sympy(MultiPoly(2), [x, y]) == sp.Integer(0)


def test_symbol_count_checked():
    with pytest.raises(ValueError):
        multipoly2sympy(MultiPoly(2), [x])


def test_symbolic_coefficients_rejected():
    a = sp.Symbol("a")
    with pytest.raises(TypeError):
        sympy2multipoly(a * x, [x])

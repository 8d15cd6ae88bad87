"""Conversion between :class:`MultiPoly` and sympy expressions.

Used to inspect implicit equations in readable form and to cross-check
results against sympy's own resultant and expansion machinery.
"""

from __future__ import annotations

import typing

import sympy as sp

from impcurve.algorithms.polynomial.multivariate import MultiPoly
from impcurve.algorithms.polynomial.univariate import Polynomial


def multipoly2sympy(p: MultiPoly | Polynomial, vars_list: typing.Sequence[sp.Symbol]) -> sp.Expr:
    """Convert a multivariate polynomial to a sympy expression.

    Parameters
    ----------
    p : MultiPoly or Polynomial
        Polynomial of rank N.
    vars_list : Sequence[sympy.Symbol]
        N symbols; ``vars_list[k]`` stands for the indeterminate ``x_k``.

    Returns
    -------
    sympy.Expr
        Expanded sum of the non-zero terms.

    Raises
    ------
    ValueError
        If the number of symbols does not match the rank.
    """
    if isinstance(p, Polynomial):
        p = MultiPoly._wrap(p)
    if len(vars_list) != p.rank:
        raise ValueError(f"Expected {p.rank} symbols in vars_list, but got {len(vars_list)}.")

    expr = sp.Integer(0)
    for I, c in p.terms():
        monomial_expr = sp.Integer(1)
        for var, k in zip(vars_list, I):
            if k > 0:
                monomial_expr *= var**k
        expr += sp.sympify(c) * monomial_expr
    return expr


def sympy2multipoly(expr: sp.Expr, vars_list: typing.Sequence[sp.Symbol], coeff: typing.Any = float) -> MultiPoly:
    """Convert a sympy polynomial expression to a :class:`MultiPoly`.

    Parameters
    ----------
    expr : sympy.Expr
        Polynomial in ``vars_list`` with numeric coefficients.
    vars_list : Sequence[sympy.Symbol]
        Generators; their count is the rank of the result.
    coeff : callable, default float
        Converter applied to every sympy coefficient (``float``, ``complex``,
        ``int`` or :class:`fractions.Fraction`-like).

    Raises
    ------
    TypeError
        If *expr* is not a polynomial in *vars_list* or a coefficient is not
        numeric.
    """
    rank = len(vars_list)
    if rank < 1:
        raise ValueError("vars_list must contain at least one symbol.")
    expr = sp.sympify(expr)
    if expr == sp.S.Zero:
        return MultiPoly(rank, coeff=coeff)

    try:
        sp_poly = sp.Poly(expr, *vars_list)
    except sp.PolynomialError as e:
        raise TypeError(f"Could not convert expr to a polynomial in {list(vars_list)}: {e}") from e

    out = MultiPoly(rank, coeff=coeff)
    for monom, c in sp_poly.terms():
        if c.free_symbols:
            raise TypeError(f"Coefficient '{c}' is not numeric.")
        out.set_coefficient(monom, coeff(c))
    return out

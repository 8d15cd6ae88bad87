"""Generic univariate polynomial.

:class:`Polynomial` stores a dense coefficient list indexed by exponent. The
coefficient type is arbitrary: plain numbers, or other polynomials, which is
how multivariate polynomials are assembled (see
:mod:`impcurve.algorithms.polynomial.multivariate`).

Notes
-----
- A polynomial is never empty: the zero polynomial holds a single zero
  coefficient.
- ``max_degree`` is the highest allocated exponent (the coefficient may be
  zero), ``real_degree`` the highest exponent with a non-zero coefficient.
  Products add ``max_degree`` values, so :meth:`Polynomial.normalize` is used
  to trim leading zeros between operations.
- Operators accept either a polynomial of the same rank or a "coefficient"
  of lower rank. ``+``/``-`` apply a coefficient to the constant term,
  ``*``/``/`` apply it to every coefficient.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Iterable, Iterator, List, Optional

import numpy as np

from impcurve.algorithms.polynomial import ring
from impcurve.algorithms.utils.exceptions import RangeError


class Polynomial:
    """Univariate polynomial with coefficients of any ring type.

    Parameters
    ----------
    coeffs : Iterable, optional
        Coefficients ordered by exponent (``coeffs[i]`` multiplies ``x^i``).
        Values are copied, so the polynomial exclusively owns them.
    zero : Any, optional
        Zero element of the coefficient ring. Inferred from ``coeffs[0]`` when
        omitted; ``0.0`` for an empty coefficient list.

    Examples
    --------
    >>> p = Polynomial([1.0, 0.0, 2.0])    # 1 + 2 x^2
    >>> p(3.0)
    19.0
    >>> str(p * p)
    '{1.0, 0.0, 4.0, 0.0, 4.0}'
    """

    __slots__ = ("_coeff", "_zero")

    def __init__(self, coeffs: Optional[Iterable[Any]] = None, zero: Any = None):
        if isinstance(coeffs, np.ndarray):
            coeffs = coeffs.tolist()
        coeffs = list(coeffs) if coeffs is not None else []
        if zero is None:
            zero = ring.zero(coeffs[0]) if coeffs else 0.0
        self._zero = zero
        if coeffs:
            self._coeff: List[Any] = [ring.clone(c) for c in coeffs]
        else:
            self._coeff = [ring.zero(zero)]

    @classmethod
    def monomial(cls, c: Any, i: int = 0, zero: Any = None) -> "Polynomial":
        """Build ``c * x^i``."""
        if zero is None:
            zero = ring.zero(c)
        return cls([ring.zero(zero) for _ in range(i)] + [c], zero=zero)

    @property
    def rank(self) -> int:
        """Number of indeterminates (1 plus the rank of the coefficients)."""
        return 1 + ring.rank_of(self._zero)

    def zero_coefficient(self) -> Any:
        """Return a fresh zero of the coefficient ring."""
        return ring.zero(self._zero)

    def zero_like(self) -> "Polynomial":
        return Polynomial([ring.zero(self._zero)], zero=self._zero)

    def one_like(self) -> "Polynomial":
        return Polynomial([ring.one(self._zero)], zero=self._zero)

    def copy(self) -> "Polynomial":
        return Polynomial(self._coeff, zero=self._zero)

    def __len__(self) -> int:
        return len(self._coeff)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._coeff)

    def __getitem__(self, i: int) -> Any:
        # no out-of-range checking
        return self._coeff[i]

    def __setitem__(self, i: int, c: Any) -> None:
        self._coeff[i] = c

    def max_degree(self) -> int:
        """Degree of the highest allocated coefficient (even if zero)."""
        return len(self._coeff) - 1

    def set_max_degree(self, n: int) -> None:
        """Truncate or zero-extend the storage so that ``max_degree() == n``."""
        if n < 0:
            raise RangeError("max degree must be non-negative")
        size = len(self._coeff)
        if n + 1 < size:
            del self._coeff[n + 1:]
        else:
            self._coeff.extend(ring.zero(self._zero) for _ in range(n + 1 - size))

    def real_degree(self) -> int:
        """Degree of the highest non-zero coefficient.

        The zero polynomial has real degree 0.
        """
        for i in range(len(self._coeff) - 1, 0, -1):
            if not ring.is_zero(self._coeff[i]):
                return i
        return 0

    def is_zero(self) -> bool:
        return self.real_degree() == 0 and ring.is_zero(self._coeff[0])

    def normalize(self) -> None:
        """Trim leading zero coefficients; afterwards
        ``max_degree() == real_degree()``."""
        rd = self.real_degree()
        if rd != self.max_degree():
            del self._coeff[rd + 1:]

    def coefficient(self, i: int) -> Any:
        """Safe getter: return the coefficient of ``x^i`` or a fresh zero when
        ``i`` exceeds ``max_degree``. Never mutates the polynomial.

        Raises
        ------
        RangeError
            If ``i`` is negative.
        """
        if i < 0:
            raise RangeError(f"negative exponent {i}")
        if i > self.max_degree():
            return ring.zero(self._zero)
        return self._coeff[i]

    def set_coefficient(self, i: int, c: Any) -> None:
        """Safe setter: grow the storage (zero-filling the gap) when needed.

        Setting a zero past the end is a no-op. A negative ``i`` raises
        ``RangeError``.
        """
        if i < 0:
            raise RangeError(f"negative exponent {i}")
        if i > self.max_degree():
            if ring.is_zero(c):
                return
            self._coeff.extend(ring.zero(self._zero) for _ in range(i - len(self._coeff)))
            self._coeff.append(ring.clone(c))
        else:
            self._coeff[i] = ring.clone(c)

    def leading_coefficient(self) -> Any:
        return self._coeff[self.real_degree()]

    def map(self, fn: Callable[[Any], Any]) -> "Polynomial":
        """Return a new polynomial with *fn* applied to every coefficient."""
        out = [fn(c) for c in self._coeff]
        return Polynomial(out, zero=ring.zero(out[0]))

    def __call__(self, x: Any) -> Any:
        """Evaluate with Horner's scheme.

        *x* can be any type supporting ``+=`` and ``*=`` against the coefficient
        type, e.g. a number or another polynomial (composition).
        """
        r = ring.zero(x)
        for i in range(self.max_degree(), 0, -1):
            r += self._coeff[i]
            r *= x
        r += self._coeff[0]
        return r

    def _same_rank(self, other: Any) -> bool:
        if isinstance(other, Polynomial):
            if other.rank > self.rank:
                raise RangeError(
                    f"cannot combine a rank-{other.rank} polynomial into a rank-{self.rank} one"
                )
            return other.rank == self.rank
        return False

    def __neg__(self) -> "Polynomial":
        return Polynomial([-c for c in self._coeff], zero=self._zero)

    def __pos__(self) -> "Polynomial":
        return self.copy()

    def __iadd__(self, other: Any) -> "Polynomial":
        if self._same_rank(other):
            sz = min(len(self._coeff), len(other._coeff))
            for i in range(sz):
                self._coeff[i] += other._coeff[i]
            self._coeff.extend(ring.clone(c) for c in other._coeff[sz:])
        else:
            self._coeff[0] += other
        return self

    def __isub__(self, other: Any) -> "Polynomial":
        if self._same_rank(other):
            sz = min(len(self._coeff), len(other._coeff))
            for i in range(sz):
                self._coeff[i] -= other._coeff[i]
            self._coeff.extend(-c for c in other._coeff[sz:])
        else:
            self._coeff[0] -= other
        return self

    def __imul__(self, other: Any) -> "Polynomial":
        if self._same_rank(other):
            r = [ring.zero(self._zero) for _ in range(len(self._coeff) + len(other._coeff) - 1)]
            for i, a in enumerate(self._coeff):
                if ring.is_zero(a):
                    continue
                for j, b in enumerate(other._coeff):
                    r[i + j] += a * b
            self._coeff = r
        else:
            for i in range(len(self._coeff)):
                self._coeff[i] *= other
        return self

    def __itruediv__(self, c: Any) -> "Polynomial":
        for i in range(len(self._coeff)):
            self._coeff[i] /= c
        return self

    def __ilshift__(self, n: int) -> "Polynomial":
        """Multiply by ``x^n`` in place."""
        self._coeff[0:0] = [ring.zero(self._zero) for _ in range(n)]
        return self

    def __add__(self, other: Any) -> "Polynomial":
        if isinstance(other, Polynomial) and other.rank > self.rank:
            return other + self
        r = self.copy()
        r += other
        return r

    def __radd__(self, other: Any) -> "Polynomial":
        return self + other

    def __sub__(self, other: Any) -> "Polynomial":
        if isinstance(other, Polynomial) and other.rank > self.rank:
            r = -other
            r += self
            return r
        r = self.copy()
        r -= other
        return r

    def __rsub__(self, other: Any) -> "Polynomial":
        r = -self
        r += other
        return r

    def __mul__(self, other: Any) -> "Polynomial":
        if isinstance(other, Polynomial) and other.rank > self.rank:
            return other * self
        r = self.copy()
        r *= other
        return r

    def __rmul__(self, other: Any) -> "Polynomial":
        return self * other

    def __truediv__(self, c: Any) -> "Polynomial":
        r = self.copy()
        r /= c
        return r

    def __lshift__(self, n: int) -> "Polynomial":
        r = self.copy()
        r <<= n
        return r

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Polynomial):
            if other.rank != self.rank:
                return False
            d = self.real_degree()
            if d != other.real_degree():
                return False
            return all(self._coeff[i] == other._coeff[i] for i in range(d + 1))
        if isinstance(other, (int, float, complex, np.generic)) or ring.rank_of(other) < self.rank:
            return self.real_degree() == 0 and self._coeff[0] == other
        return NotImplemented

    __hash__ = None

    def __str__(self) -> str:
        return "{" + ", ".join(str(c) for c in self._coeff) + "}"

    def __repr__(self) -> str:
        return f"Polynomial({self})"


_TOKEN_RE = re.compile(r"\s*([{},]|[^{},\s][^{},]*)")


def parse_polynomial(text: str, coeff_type: Callable[[str], Any] = float) -> Polynomial:
    """Rebuild a (possibly nested) polynomial from its brace text form.

    Parameters
    ----------
    text : str
        Text produced by ``str(polynomial)``, e.g. ``"{{1.0, 2.0}, {0.0}}"``.
    coeff_type : callable, default float
        Converter applied to every scalar token.

    Returns
    -------
    Polynomial
        Polynomial equal to the one that produced *text*.

    Raises
    ------
    RangeError
        If the text is malformed or mixes nesting depths at the same level.
    """
    tokens = [t.strip() for t in _TOKEN_RE.findall(text)]
    if not tokens:
        raise RangeError("empty polynomial text")
    pos = 0

    def parse_node():
        nonlocal pos
        if pos >= len(tokens):
            raise RangeError("unexpected end of polynomial text")
        tok = tokens[pos]
        if tok != "{":
            pos += 1
            try:
                return coeff_type(tok)
            except (TypeError, ValueError) as e:
                raise RangeError(f"invalid coefficient {tok!r} in polynomial text") from e
        pos += 1
        items = []
        while True:
            items.append(parse_node())
            if pos >= len(tokens):
                raise RangeError("unterminated '{' in polynomial text")
            sep = tokens[pos]
            pos += 1
            if sep == "}":
                break
            if sep != ",":
                raise RangeError(f"unexpected token {sep!r} in polynomial text")
        ranks = {ring.rank_of(c) for c in items}
        if len(ranks) != 1:
            raise RangeError("inconsistent nesting depth in polynomial text")
        return Polynomial(items)

    node = parse_node()
    if pos != len(tokens) or not isinstance(node, Polynomial):
        raise RangeError("polynomial text must be a single brace group")
    return node

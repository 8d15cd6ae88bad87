"""Ring-element traits for polynomial coefficients.

Generic polynomial code needs to build the additive and multiplicative
identities of its coefficient type without knowing whether that type is a
plain number or itself a (nested) polynomial. This module provides the
small set of builders used at every "create a neutral element" point.

Notes
-----
A coefficient type is described either by a numeric Python type (``float``,
``int``, ``complex``, :class:`fractions.Fraction`, numpy scalar types) or by a
prototype value. Polynomial objects expose ``zero_like``, ``one_like``,
``is_zero`` and ``rank``; numbers fall back to ``type(x)(0)`` and friends.
"""

from __future__ import annotations

import numbers
from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RingElement(Protocol):
    """Capability implemented by polynomial coefficient types."""

    rank: int

    def zero_like(self) -> "RingElement": ...

    def one_like(self) -> "RingElement": ...

    def is_zero(self) -> bool: ...

    def copy(self) -> "RingElement": ...


# fast path for the common plain-number coefficients
_SCALARS = (float, int, complex)


def _is_numeric_type(like: Any) -> bool:
    return isinstance(like, type) and (issubclass(like, numbers.Number) or issubclass(like, np.generic))


def zero(like: Any = float) -> Any:
    """Return the additive identity of the ring described by *like*.

    Parameters
    ----------
    like : type or ring element, default float
        Numeric type, or any value of the ring.

    Returns
    -------
    Any
        A fresh zero element; nested polynomials get a zero of the same rank
        and coefficient type.

    Raises
    ------
    TypeError
        If *like* is neither a numeric type nor a ring element.
    """
    if isinstance(like, _SCALARS):
        return type(like)(0)
    if _is_numeric_type(like):
        return like(0)
    if isinstance(like, np.ndarray):
        return np.zeros_like(like)
    if isinstance(like, RingElement):
        return like.zero_like()
    if isinstance(like, (numbers.Number, np.generic)):
        return type(like)(0)
    raise TypeError(f"Cannot build a zero element for {like!r}")


def one(like: Any = float) -> Any:
    """Return the multiplicative identity of the ring described by *like*.

    See :func:`zero` for the accepted arguments.
    """
    if _is_numeric_type(like):
        return like(1)
    if isinstance(like, np.ndarray):
        return np.ones_like(like)
    if isinstance(like, RingElement):
        return like.one_like()
    if isinstance(like, (numbers.Number, np.generic)):
        return type(like)(1)
    raise TypeError(f"Cannot build a unit element for {like!r}")


def is_zero(value: Any) -> bool:
    """Return True if *value* is the additive identity of its ring."""
    if isinstance(value, _SCALARS):
        return value == 0
    if isinstance(value, RingElement):
        return value.is_zero()
    return value == 0


def rank_of(value: Any) -> int:
    """Number of indeterminates carried by *value* (0 for plain numbers)."""
    return getattr(value, "rank", 0)


def clone(value: Any) -> Any:
    """Return an independent copy of *value*.

    Numbers are immutable and returned as is; polynomials and arrays are
    copied so that no two containers ever share the same nested storage.
    """
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, (RingElement, np.ndarray)):
        return value.copy()
    return value

"""
Exceptions raised by the polynomial, linear algebra and implicitization
code.

``ImpcurveError`` is the common base; ``RangeError`` reports shape and index
mismatches, ``ConvergenceError`` an iteration cap hit by the microbasis
reduction and ``DegenerateCurveError`` a parametrization with no curve to
implicitize.
"""

class ImpcurveError(Exception):
    """Base exception for impcurve errors.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class RangeError(ImpcurveError):
    """Raised when an index or a dimension does not fit the object it
    addresses (e.g. a multi-index whose length differs from the rank of the
    polynomial).

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class ConvergenceError(ImpcurveError):
    """Raised when an iterative reduction stops before reaching its target.

    Parameters
    ----------
    message : str
        The error message.
    iterations : int, optional
        Number of steps performed before giving up.
    """

    def __init__(self, message: str, iterations: int | None = None):
        super().__init__(message)
        self.iterations = iterations


class DegenerateCurveError(ImpcurveError):
    """Raised when a parametrization has no well-defined implicit equation
    (both coordinate polynomials are constant).

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)

"""Configuration for the implicitization pipeline."""

from dataclasses import dataclass

from impcurve.algorithms.utils.config import MAX_MICROBASIS_ITER, TOL


@dataclass(frozen=True)
class ImplicitizationConfig:
    """Tuning of the microbasis reduction and of the result post-processing.

    Parameters
    ----------
    max_iter : int, default MAX_MICROBASIS_ITER
        Iteration cap of the microbasis reduction. Exceeding it raises
        :class:`~impcurve.algorithms.utils.exceptions.ConvergenceError`.
    tol : float, default TOL
        Relative tolerance below which a leading coefficient left over by a
        reduction step is treated as round-off and dropped. ``0.0`` keeps
        every non-zero coefficient (exact arithmetic).
    normalize : bool, default True
        Trim leading zero coefficients of the implicit equation.
    """

    max_iter: int = MAX_MICROBASIS_ITER
    tol: float = TOL
    normalize: bool = True

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Validate the configuration."""
        if self.max_iter <= 0:
            raise ValueError("max_iter must be positive.")
        if self.tol < 0:
            raise ValueError("tol must be non-negative.")

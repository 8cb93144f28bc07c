"""
Parameter containers for the multifractal wavelet model.

``ScaleParameters`` is what the synthesizer consumes; ``FittedModel`` wraps it
with the diagnostics produced by the estimator.
"""

from dataclasses import dataclass, field

import numpy as np

from .errors import InvalidParameters
from .utils import is_power_of_two


def _readonly(values):
    array = np.array(values, dtype=np.float64).reshape(-1)
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class ScaleParameters:
    """
    Per-scale Beta shapes and root statistics of a multifractal wavelet model.

    Parameters
    ----------
    shapes : array-like
        Shape parameter p_j of the symmetric Beta multiplier at each level
        j = 0..J-1 (coarsest first). Must be > 0; ``np.inf`` gives a
        deterministic even split at that level.
    root_mean : float
        Expected value of the process (mean per sample).
    root_std : float, optional
        Standard deviation of the per-root block means. 0 (default) seeds every
        root with exactly ``root_mean``.
    n_roots : int, optional
        Number of independent cascades laid side by side (power of 2, default 1).
    """

    shapes: np.ndarray
    root_mean: float
    root_std: float = 0.0
    n_roots: int = 1

    def __post_init__(self):
        object.__setattr__(self, 'shapes', _readonly(self.shapes))
        object.__setattr__(self, 'root_mean', float(self.root_mean))
        object.__setattr__(self, 'root_std', float(self.root_std))

    @property
    def depth(self):
        """Number of cascade levels J."""
        return self.shapes.size

    @property
    def size(self):
        """Length of the sequences this model describes."""
        return self.n_roots * 2**self.depth

    def validate(self):
        """
        Check every parameter against its domain.

        Raises
        ------
        InvalidParameters
            If root_mean or root_std is negative or non-finite, n_roots is not
            a power of 2, or any shape is NaN or <= 0. The exception's
            ``level`` names the first offending shape.
        """
        if not np.isfinite(self.root_mean) or self.root_mean < 0:
            raise InvalidParameters(f"root_mean must be finite and >= 0, got {self.root_mean}")
        if not np.isfinite(self.root_std) or self.root_std < 0:
            raise InvalidParameters(f"root_std must be finite and >= 0, got {self.root_std}")
        if not is_power_of_two(self.n_roots):
            raise InvalidParameters(f"n_roots must be a power of 2, got {self.n_roots}")

        invalid = np.isnan(self.shapes) | (self.shapes <= 0)
        if np.any(invalid):
            j = int(np.flatnonzero(invalid)[0])
            raise InvalidParameters(f"Shape parameters must be > 0, got {self.shapes[j]}", level=j)
        return self

    def as_dict(self):
        return {
            'shapes': self.shapes.tolist(),
            'root_mean': self.root_mean,
            'root_std': self.root_std,
            'n_roots': self.n_roots,
        }


@dataclass(frozen=True, eq=False)
class FittedModel:
    """
    Result of :func:`mwm.analysis.mwm_estimate`.

    Attributes
    ----------
    parameters : ScaleParameters
        The fitted model, ready for :func:`mwm.simulation.mwm_synthesize`.
    size : int
        Length N of the analysed sequence.
    depth : int
        Number of fitted levels J.
    observed_moments : np.ndarray
        Mean squared detail coefficient per level, measured on the data.
    model_moments : np.ndarray
        Mean squared detail coefficient per level implied by the fitted shapes.
    residuals : np.ndarray
        Relative error (model - observed) / observed per level; 0 for
        degenerate levels.
    residual_norm : float
        Root mean square of ``residuals`` (0 for an empty model).
    degenerate_levels : tuple of int
        Levels whose detail coefficients were all zero.
    clamped_levels : tuple of int
        Levels whose raw estimate fell outside [min_shape, max_shape].
    """

    parameters: ScaleParameters
    size: int
    depth: int
    observed_moments: np.ndarray
    model_moments: np.ndarray
    residuals: np.ndarray
    residual_norm: float
    degenerate_levels: tuple = field(default_factory=tuple)
    clamped_levels: tuple = field(default_factory=tuple)

    def __post_init__(self):
        for name in ('observed_moments', 'model_moments', 'residuals'):
            object.__setattr__(self, name, _readonly(getattr(self, name)))

    @property
    def shapes(self):
        return self.parameters.shapes

    @property
    def root_mean(self):
        return self.parameters.root_mean

    def as_dict(self):
        """Plain-data view for writers and reports."""
        result = self.parameters.as_dict()
        result.update({
            'size': self.size,
            'depth': self.depth,
            'observed_moments': self.observed_moments.tolist(),
            'model_moments': self.model_moments.tolist(),
            'residuals': self.residuals.tolist(),
            'residual_norm': self.residual_norm,
            'degenerate_levels': list(self.degenerate_levels),
            'clamped_levels': list(self.clamped_levels),
        })
        return result

import numpy as np
from scipy import stats

from ..errors import InvalidParameters
from ..utils import resolve_rng


def _check_shape(shape, level=None):
    if not isinstance(shape, (int, float, np.integer, np.floating)) or np.isnan(shape) or shape <= 0:
        raise InvalidParameters(f"Shape parameter must be a number > 0, got {shape}", level=level)
    return float(shape)


def sample_multipliers(shape, size, rng=None):
    """
    Draw symmetric Beta multipliers on [-1, 1].

    Each multiplier is m = 2A - 1 with A ~ Beta(shape, shape). The density is
    symmetric around 0, so E[m] = 0 and Var(m) = 1 / (2 * shape + 1).
    Small shapes push the mass towards +-1 (strongly intermittent splits),
    large shapes concentrate it around 0 (nearly even splits).

    Parameters
    ----------
    shape : float
        Beta shape parameter, > 0. ``np.inf`` returns zeros without
        consuming any random numbers.
    size : int
        Number of multipliers to draw.
    rng : None, int or np.random.Generator, optional
        Random source. Pass a seeded Generator (or a seed) for reproducible
        draws; the numpy global random state is never touched.

    Returns
    -------
    np.ndarray
        1-D float64 array of ``size`` multipliers in [-1, 1].

    Raises
    ------
    InvalidParameters
        If shape is NaN or <= 0.
    """
    shape = _check_shape(shape)
    if np.isinf(shape):
        return np.zeros(size, dtype=np.float64)

    rng = resolve_rng(rng)
    A = stats.beta.rvs(shape, shape, size=size, random_state=rng)
    return 2.0 * np.asarray(A, dtype=np.float64).reshape(-1) - 1.0


def sample_multiplier(shape, rng=None):
    """
    Draw a single symmetric Beta multiplier on [-1, 1].

    See :func:`sample_multipliers` for the distribution.

    Returns
    -------
    float
    """
    return float(sample_multipliers(shape, 1, rng)[0])


def multiplier_variance(shape):
    """
    Variance of a symmetric Beta multiplier on [-1, 1]: 1 / (2 * shape + 1).

    Parameters
    ----------
    shape : float or array-like
        Shape parameter(s), > 0. ``np.inf`` gives 0.
    """
    return 1.0 / (2.0 * np.asarray(shape, dtype=np.float64) + 1.0)


def shape_from_variance(variance):
    """
    Shape parameter giving a multiplier of the requested variance.

    Inverse of :func:`multiplier_variance`: shape = (1 / variance - 1) / 2.
    A variance of 0 maps to ``np.inf``; variances above 1/3 give shapes
    below 1 (U-shaped Beta) and a variance of 1 gives 0.

    Parameters
    ----------
    variance : float or array-like
        Multiplier variance(s) in [0, 1].
    """
    variance = np.asarray(variance, dtype=np.float64)
    if np.any(np.isnan(variance)) or np.any((variance < 0) | (variance > 1)):
        raise InvalidParameters("Multiplier variance must lie in [0, 1]")
    with np.errstate(divide='ignore'):
        return 0.5 * (1.0 / variance - 1.0)

import numpy as np
import warnings

from .. import backend as B
from ..errors import DegenerateScaleWarning, InvalidLength, InvalidParameters
from ..model import FittedModel, ScaleParameters
from ..utils import check_sequence

DEFAULT_MIN_SHAPE = 1e-3
DEFAULT_MAX_SHAPE = 1e8


def _coarse_levels(n, min_coarse):
    """Number of levels leaving at least min_coarse coarse coefficients."""
    if not isinstance(min_coarse, (int, np.integer)) or min_coarse < 1:
        raise InvalidParameters(f"min_coarse must be a positive integer, got {min_coarse}")
    if min_coarse > n:
        raise InvalidLength(f"min_coarse={min_coarse} exceeds the sequence length {n}")
    return int(n // min_coarse).bit_length() - 1


def _scale_moments(data, min_coarse):
    """Decompose and return (coarse sums, smooth moments, detail moments) per level."""
    levels = _coarse_levels(data.size, min_coarse)
    smooths, details = B.haar_analysis(data, levels)

    smooth_moments = np.array([B.mean_square(smooths[j]) for j in range(levels)])
    detail_moments = np.array([B.mean_square(detail) for detail in details])
    return smooths[0], smooth_moments, detail_moments


def detail_moment_analysis(data, min_coarse=1):
    """
    Mean squared Haar detail coefficient at each dyadic scale.

    Details use the sum/difference convention, so at level j a coefficient is
    the difference of two adjacent block sums of length 2**(J-j-1).

    Parameters
    ----------
    data : array-like
        1-D non-negative finite sequence, length a power of 2.
    min_coarse : int, optional
        Minimum number of coarse coefficients left after the decomposition
        (default: 1, full decomposition).

    Returns
    -------
    tuple (np.ndarray, np.ndarray)
        scales : block length 2**(J-j) of the parent node at each level j,
            coarsest first.
        moments : mean squared detail coefficient at each level.
    """
    data = check_sequence(data)
    _, _, detail_moments = _scale_moments(data, min_coarse)
    scales = 2**np.arange(detail_moments.size, 0, -1)
    return scales, detail_moments


def implied_detail_moments(shapes, root_moment):
    """
    Detail second moments implied by a set of shapes.

    Propagates the root second moment down the cascade:
    E[D_j^2] = E[V_j^2] / (2 p_j + 1) and
    E[V_{j+1}^2] = E[V_j^2] (1 + 1 / (2 p_j + 1)) / 4.

    Parameters
    ----------
    shapes : array-like
        Shape parameters p_0..p_{J-1}.
    root_moment : float
        Mean squared root (coarse) smooth value E[V_0^2].

    Returns
    -------
    np.ndarray
        E[D_j^2] for j = 0..J-1.
    """
    shapes = np.asarray(shapes, dtype=np.float64)
    moments = np.empty(shapes.size)
    smooth = root_moment
    for j, p in enumerate(shapes):
        variance = 1.0 / (2.0 * p + 1.0)
        moments[j] = smooth * variance
        smooth = smooth * (1.0 + variance) / 4.0
    return moments


def mwm_estimate(data, min_coarse=1, min_shape=DEFAULT_MIN_SHAPE, max_shape=DEFAULT_MAX_SHAPE):
    """
    Fit a multifractal wavelet model with symmetric Beta multipliers.

    The data is Haar-decomposed (sum/difference convention). Under the model a
    detail coefficient is D = A V with V the parent block sum and A a symmetric
    Beta(p, p) multiplier on [-1, 1], independent of V, so

        E[D_j^2] = E[V_j^2] / (2 p_j + 1)

    and each shape follows in closed form from the empirical second moments,
    p_j = (E[V_j^2] / E[D_j^2] - 1) / 2. The details have zero mean under the
    model, so their mean square is their variance.

    Parameters
    ----------
    data : array-like
        1-D non-negative finite sequence whose length is a power of 2.
    min_coarse : int, optional
        Minimum number of coarse scaling coefficients used for the root
        statistics. The decomposition uses J = floor(log2(N / min_coarse))
        levels, leaving N / 2**J roots. Default 1 (single root, full tree).
        With several roots, ``root_std`` is the sample standard deviation
        (n - 1 denominator) of the per-root block means.
    min_shape : float, optional
        Lower clamp for the shapes (default: 1e-3). Must be > 0.
    max_shape : float, optional
        Upper clamp for the shapes, also used for degenerate levels
        (default: 1e8). May be ``np.inf``.

    Returns
    -------
    FittedModel
        Fitted parameters with per-level diagnostics.

    Raises
    ------
    InvalidLength
        If data is empty, not 1-D, not of power-of-2 length, or shorter than
        min_coarse.
    InvalidSequence
        If data contains negative, NaN or infinite values.
    InvalidParameters
        If min_coarse or the clamps are invalid.

    Warns
    -----
    DegenerateScaleWarning
        For levels whose detail coefficients are all zero; their shape is set
        to max_shape.
    UserWarning
        When raw estimates are clamped into [min_shape, max_shape].

    Examples
    --------
    >>> fit = mwm_estimate(np.random.default_rng(0).gamma(2.0, size=1024))
    >>> fit.depth
    10

    Notes
    -----
    By Parseval, E[V_{j+1}^2] = (E[V_j^2] + E[D_j^2]) / 4 holds exactly on the
    data, so the shapes also satisfy the detail-energy recursion
    p_{j+1} = eta_j (p_j + 1) / 4 - 1/2 with eta_j = E[D_j^2] / E[D_{j+1}^2]
    wherever no clamping occurs.
    """
    if not (min_shape > 0 and max_shape >= min_shape):
        raise InvalidParameters(
            f"Shape clamps must satisfy 0 < min_shape <= max_shape, got {min_shape}, {max_shape}")

    data = check_sequence(data)
    coarse, smooth_moments, detail_moments = _scale_moments(data, min_coarse)
    depth = detail_moments.size
    block = data.size // coarse.size

    root_mean = B.mean(coarse) / block
    root_std = B.std(coarse / block, ddof=1) if coarse.size > 1 else 0.0

    degenerate = detail_moments == 0
    with np.errstate(divide='ignore', invalid='ignore'):
        raw = 0.5 * (smooth_moments / detail_moments - 1.0)

    degenerate_levels = tuple(int(j) for j in np.flatnonzero(degenerate))
    if degenerate_levels:
        warnings.warn(f"Levels {list(degenerate_levels)} have no detail energy; "
                      f"shape set to max_shape={max_shape}", DegenerateScaleWarning)

    out_of_range = ~degenerate & ((raw < min_shape) | (raw > max_shape))
    clamped_levels = tuple(int(j) for j in np.flatnonzero(out_of_range))
    if clamped_levels:
        warnings.warn(f"Shape estimates at levels {list(clamped_levels)} clamped to "
                      f"[{min_shape}, {max_shape}]", UserWarning)

    shapes = np.where(degenerate, max_shape, np.clip(raw, min_shape, max_shape))

    root_moment = smooth_moments[0] if depth else B.mean_square(coarse)
    model_moments = implied_detail_moments(shapes, root_moment)
    residuals = np.zeros(depth)
    observed = ~degenerate
    residuals[observed] = (model_moments[observed] - detail_moments[observed]) / detail_moments[observed]
    residual_norm = float(np.sqrt(np.mean(residuals**2))) if depth else 0.0

    parameters = ScaleParameters(shapes=shapes, root_mean=root_mean, root_std=root_std,
                                 n_roots=int(coarse.size))
    return FittedModel(
        parameters=parameters,
        size=int(data.size),
        depth=depth,
        observed_moments=detail_moments,
        model_moments=model_moments,
        residuals=residuals,
        residual_norm=residual_norm,
        degenerate_levels=degenerate_levels,
        clamped_levels=clamped_levels,
    )

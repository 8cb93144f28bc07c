import numpy as np

from .. import backend as B
from ..errors import InvalidLength, InvalidParameters
from ..model import FittedModel, ScaleParameters
from ..transform import ScaleTree
from ..utils import resolve_rng
from .multipliers import sample_multipliers


def _resolve_parameters(params, size):
    """Validate params and size together, before any random draw."""
    if isinstance(params, FittedModel):
        params = params.parameters
    if not isinstance(params, ScaleParameters):
        raise InvalidParameters(
            f"Expected ScaleParameters or FittedModel, got {type(params).__name__}")
    params.validate()

    if size is not None and (not isinstance(size, (int, np.integer)) or size != params.size):
        raise InvalidLength(
            f"size {size} does not match the model: {params.n_roots} root(s) and "
            f"{params.depth} levels give length {params.size}")
    return params


def _root_values(params, rng):
    """Total mass of each root block."""
    block = 2**params.depth
    if params.root_std == 0 or params.root_mean == 0:
        return B.full(params.n_roots, params.root_mean * block)

    # Gamma block means: non-negative with the requested mean and spread
    k = (params.root_mean / params.root_std)**2
    theta = params.root_std**2 / params.root_mean
    return B.asarray(rng.gamma(k, theta, size=params.n_roots) * block)


def _run_cascade(params, rng, keep_levels):
    """Draw roots then multipliers level by level, and run the cascade."""
    roots = _root_values(params, rng)
    multipliers = [sample_multipliers(shape, params.n_roots * 2**j, rng)
                   for j, shape in enumerate(params.shapes)]
    return B.cascade(roots, multipliers, keep_levels=keep_levels)


def mwm_synthesize(params, size=None, rng=None, return_tree=False):
    """
    Generate a non-negative sequence from a multifractal wavelet model.

    The sequence is built top-down as a multiplicative cascade. Each root
    holds the total mass of its block (``root_mean`` times the block length).
    At level j every node value V is split into V(1 + m)/2 and V(1 - m)/2 with
    m a symmetric Beta(p_j, p_j) multiplier on [-1, 1]. The two children sum
    to V and stay >= 0 because |m| <= 1. The leaves are the output; no
    inverse transform is needed since the split acts on values, not on
    wavelet coefficients.

    Parameters
    ----------
    params : ScaleParameters or FittedModel
        Model to simulate. All parameters are validated before any sampling.
    size : int, optional
        Output length. Must equal ``params.size`` (n_roots * 2**J); defaults
        to it.
    rng : None, int or np.random.Generator, optional
        Random source. The same seed (or an identically seeded Generator)
        with the same parameters gives a bit-identical sequence.
    return_tree : bool, optional
        If True, return the full value tree (see :func:`mwm_cascade`)
        instead of the leaves only.

    Returns
    -------
    numpy.ndarray or ScaleTree
        1-D float64 array of length ``params.size``, every value >= 0. With
        ``return_tree=True``, a ScaleTree of J + 1 levels whose deepest level
        is that array.

    Raises
    ------
    InvalidParameters
        If root_mean < 0, any shape is <= 0 or NaN, or root settings are invalid.
    InvalidLength
        If size does not match the model depth.

    Examples
    --------
    >>> params = ScaleParameters(shapes=[2.0] * 10, root_mean=1.0)
    >>> x = mwm_synthesize(params, 1024, rng=42)
    >>> x.shape
    (1024,)

    Notes
    -----
    - Each level is drawn as one vectorized step: the splits within a level
      are independent given the parent level.
    - Memory use is O(N): the multipliers of all levels together hold
      N - n_roots values. Only the leaves are kept unless a tree is requested.
    """
    params = _resolve_parameters(params, size)
    rng = resolve_rng(rng)

    if return_tree:
        return ScaleTree(_run_cascade(params, rng, keep_levels=True), n_roots=params.n_roots)
    return _run_cascade(params, rng, keep_levels=False)


def mwm_cascade(params, rng=None):
    """
    Generate the full value tree of a multifractal wavelet cascade.

    Same construction as :func:`mwm_synthesize`, but every level is kept.
    Given the same random source, the deepest level equals the sequence
    returned by :func:`mwm_synthesize`.

    Parameters
    ----------
    params : ScaleParameters or FittedModel
        Model to simulate.
    rng : None, int or np.random.Generator, optional
        Random source.

    Returns
    -------
    ScaleTree
        J + 1 levels: the roots at level 0 and the output sequence at level J.
        Each node equals the sum of its two children.
    """
    return mwm_synthesize(params, rng=rng, return_tree=True)

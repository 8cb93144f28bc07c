import numpy as np

from .. import backend as B
from ..errors import InvalidLength, InvalidParameters
from ..utils import check_sequence, dyadic_depth
from .tree import ScaleTree


def haar_decompose(sequence, levels=None):
    """
    Partial Haar decomposition of a dyadic sequence.

    Uses the unnormalized (sum/difference) convention: adjacent values a, b at
    one resolution give the smooth value a + b at the next coarser resolution
    and the detail coefficient a - b. Smooth values are therefore block sums.

    Parameters
    ----------
    sequence : array-like
        1-D finite sequence whose length N is a power of 2. Values may be of
        either sign; the transform is linear.
    levels : int, optional
        Number of levels to decompose, 0 <= levels <= log2(N).
        Defaults to log2(N) (full decomposition down to one root).

    Returns
    -------
    coarse : np.ndarray
        The N / 2**levels coarsest smooth values (block sums).
    details : ScaleTree
        Detail coefficients; level j holds ``coarse.size * 2**j`` values,
        level 0 being the coarsest.

    Raises
    ------
    InvalidLength
        If the length is not a power of 2 or ``levels`` is out of range.
    InvalidSequence
        If the sequence contains NaN or infinite values.
    """
    smooth = check_sequence(sequence, nonnegative=False)
    depth = dyadic_depth(smooth.size)
    if levels is None:
        levels = depth
    if not 0 <= levels <= depth:
        raise InvalidLength(f"levels must be between 0 and {depth}, got {levels}")

    smooths, detail_levels = B.haar_analysis(smooth, levels)
    coarse = np.array(smooths[0])
    return coarse, ScaleTree(detail_levels, n_roots=coarse.size)


def haar_reconstruct(coarse, details):
    """
    Invert :func:`haar_decompose`.

    Parameters
    ----------
    coarse : array-like
        Coarsest smooth values, one per tree in ``details``.
    details : ScaleTree
        Detail coefficients as returned by :func:`haar_decompose`.

    Returns
    -------
    np.ndarray
        Reconstructed sequence of length ``coarse.size * 2**details.n_levels``.
    """
    smooth = np.atleast_1d(np.asarray(coarse, dtype=np.float64))
    if smooth.ndim != 1 or smooth.size != details.n_roots:
        raise InvalidParameters(
            f"Tree has {details.n_roots} roots but {smooth.size} coarse values were given")

    return B.haar_reconstruction(smooth, [detail for _, detail in details.top_down()])


def haar_forward(sequence):
    """
    Full Haar decomposition of a dyadic sequence.

    Parameters
    ----------
    sequence : array-like
        1-D finite sequence of length N = 2**J.

    Returns
    -------
    root_smooth : float
        Sum of the sequence (N times its mean).
    details : ScaleTree
        J levels of detail coefficients, level j holding 2**j values.
        Empty when N = 1.

    Examples
    --------
    >>> root, details = haar_forward([1.0, 3.0, 2.0, 2.0])
    >>> root
    8.0
    >>> details.level(0), details.level(1)
    (array([0.]), array([-2.,  0.]))
    """
    coarse, details = haar_decompose(sequence)
    return float(coarse[0]), details


def haar_inverse(root_smooth, details):
    """
    Invert :func:`haar_forward`.

    Parameters
    ----------
    root_smooth : float
        Sum of the sequence to reconstruct.
    details : ScaleTree
        Single-root detail tree.

    Returns
    -------
    np.ndarray
        Sequence of length 2**details.n_levels.
    """
    if details.n_roots != 1:
        raise InvalidParameters(
            f"haar_inverse needs a single-root tree, got {details.n_roots} roots; "
            "use haar_reconstruct instead")
    return haar_reconstruct([root_smooth], details)

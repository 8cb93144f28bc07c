"""
Utility functions for mwm package

Validation helpers shared by the transform, simulation and analysis modules.
"""

import numpy as np

from ..errors import InvalidLength, InvalidSequence


def is_power_of_two(n):
    """Return True if n is a positive integer power of two (1 included)."""
    return isinstance(n, (int, np.integer)) and n > 0 and (n & (n - 1)) == 0


def dyadic_depth(n):
    """
    Number of dyadic levels for a length-n sequence.

    Parameters
    ----------
    n : int
        Sequence length, must be a power of two.

    Returns
    -------
    int
        J such that n = 2**J.

    Raises
    ------
    InvalidLength
        If n is zero or not a power of two.
    """
    if not is_power_of_two(n):
        raise InvalidLength(f"Length must be a positive power of 2, got {n}")
    return int(n).bit_length() - 1


def check_sequence(data, nonnegative=True):
    """
    Validate a sequence and return it as a 1-D float64 array.

    Parameters
    ----------
    data : array-like
        Input sequence.
    nonnegative : bool, optional
        If True (default), negative entries are rejected.

    Returns
    -------
    np.ndarray
        The validated sequence (a float64 copy when a conversion was needed).

    Raises
    ------
    InvalidLength
        If data is not 1-D or its length is not a power of two.
    InvalidSequence
        If data contains NaN, infinite or (when requested) negative values.
    """
    data = np.asarray(data, dtype=np.float64)
    if data.ndim != 1:
        raise InvalidLength(f"Sequence must be 1-D, got array with shape {data.shape}")
    dyadic_depth(data.size)

    bad = ~np.isfinite(data)
    if np.any(bad):
        raise InvalidSequence("Sequence contains NaN or infinite values",
                              index=int(np.flatnonzero(bad)[0]))
    if nonnegative:
        negative = data < 0
        if np.any(negative):
            raise InvalidSequence("Sequence contains negative values",
                                  index=int(np.flatnonzero(negative)[0]))
    return data


def resolve_rng(rng=None):
    """
    Turn a seed or generator into a ``numpy.random.Generator``.

    Parameters
    ----------
    rng : None, int, np.random.SeedSequence or np.random.Generator
        Random source. A Generator is returned unchanged, so the caller keeps
        ownership of its state. None draws fresh entropy from the OS; the
        numpy global random state is never used.

    Returns
    -------
    np.random.Generator
    """
    return np.random.default_rng(rng)

"""
Backend module for mwm - provides unified numpy/torch interface.

Automatically detects PyTorch availability and provides wrapper functions
that work with either numpy or torch. All functions return numpy arrays.
"""

import numpy as np
import os

# Try to import torch
try:
    import torch
    _torch_available = True
except ImportError:
    _torch_available = False

# Global state
_backend = 'numpy'  # Default backend
_num_threads = max(1, int(os.cpu_count() * 0.9)) if os.cpu_count() else 4

# Auto-detect torch if available
if _torch_available:
    _backend = 'torch'


def set_backend(backend='numpy'):
    """
    Set computational backend.

    Parameters
    ----------
    backend : str
        Backend to use: 'numpy' or 'torch'

    Raises
    ------
    ValueError
        If backend is not recognized
    ImportError
        If torch backend requested but torch not installed
    """
    global _backend

    if backend not in ('numpy', 'torch'):
        raise ValueError(f"Unknown backend: {backend}. Must be 'numpy' or 'torch'")

    if backend == 'torch' and not _torch_available:
        raise ImportError("PyTorch not available. Install with: pip install torch")

    _backend = backend

    # Set threading for the backend
    if _backend == 'torch':
        torch.set_num_threads(_num_threads)
    else:
        os.environ['OMP_NUM_THREADS'] = str(_num_threads)
        os.environ['MKL_NUM_THREADS'] = str(_num_threads)


def get_backend():
    """Get current backend name."""
    return _backend


def set_num_threads(n):
    """
    Set number of threads for parallel operations.

    Parameters
    ----------
    n : int
        Number of threads to use
    """
    global _num_threads
    _num_threads = max(1, int(n))

    if _backend == 'torch':
        torch.set_num_threads(_num_threads)
    else:
        os.environ['OMP_NUM_THREADS'] = str(_num_threads)
        os.environ['MKL_NUM_THREADS'] = str(_num_threads)


def _as_tensor(x):
    x = np.ascontiguousarray(x, dtype=np.float64)
    if not x.flags.writeable:
        x = x.copy()
    return torch.as_tensor(x)


# ============================================================================
# Array Creation
# ============================================================================

def asarray(x):
    """Convert to float64 array."""
    if _backend == 'numpy':
        return np.asarray(x, dtype=np.float64)
    else:
        return _as_tensor(x).numpy()


def full(size, fill_value):
    """Create float64 array filled with value."""
    if _backend == 'numpy':
        return np.full(size, fill_value, dtype=np.float64)
    else:
        result = torch.full((size,), float(fill_value), dtype=torch.float64)
        return result.numpy()


# ============================================================================
# Dyadic Operations
# ============================================================================
# Each function runs every level of a decomposition or cascade in one pass,
# so the torch branch converts to and from numpy once per call.

def _interleave(even, odd):
    result = np.empty(even.size + odd.size, dtype=np.float64)
    result[0::2] = even
    result[1::2] = odd
    return result


def _interleave_tensor(even, odd):
    return torch.stack([even, odd], dim=1).reshape(-1)


def haar_analysis(x, levels):
    """
    Sum/difference Haar analysis over several levels.

    Parameters
    ----------
    x : array-like
        1-D sequence whose length is divisible by 2**levels.
    levels : int
        Number of analysis steps.

    Returns
    -------
    smooths : list of np.ndarray
        ``levels + 1`` arrays of block sums, coarsest first; the last one is x.
    details : list of np.ndarray
        ``levels`` arrays of pair differences, coarsest first. ``details[j]``
        has the same size as ``smooths[j]``.
    """
    if _backend == 'numpy':
        smooth = np.asarray(x, dtype=np.float64)
        smooths, details = [smooth], []
        for _ in range(levels):
            details.append(smooth[0::2] - smooth[1::2])
            smooth = smooth[0::2] + smooth[1::2]
            smooths.append(smooth)
    else:
        smooth = _as_tensor(x)
        smooths, details = [smooth], []
        for _ in range(levels):
            details.append(smooth[0::2] - smooth[1::2])
            smooth = smooth[0::2] + smooth[1::2]
            smooths.append(smooth)
        smooths = [s.numpy() for s in smooths]
        details = [d.numpy() for d in details]

    smooths.reverse()
    details.reverse()
    return smooths, details


def haar_reconstruction(coarse, details, keep_levels=False):
    """
    Invert :func:`haar_analysis`: a, b = (s + d)/2, (s - d)/2 at every level.

    Parameters
    ----------
    coarse : array-like
        Coarsest block sums.
    details : list of array-like
        Detail coefficients, coarsest first; ``details[j]`` has
        ``coarse.size * 2**j`` entries.
    keep_levels : bool, optional
        If True, return the smooth values of every level (coarsest first)
        instead of only the finest one.
    """
    if _backend == 'numpy':
        smooth = np.asarray(coarse, dtype=np.float64)
        smooths = [smooth]
        for detail in details:
            detail = np.asarray(detail, dtype=np.float64)
            smooth = _interleave((smooth + detail) / 2, (smooth - detail) / 2)
            smooths.append(smooth)
    else:
        smooth = _as_tensor(coarse)
        smooths = [smooth]
        for detail in details:
            detail = _as_tensor(detail)
            smooth = _interleave_tensor((smooth + detail) / 2, (smooth - detail) / 2)
            smooths.append(smooth)
        smooths = [s.numpy() for s in smooths]

    return smooths if keep_levels else smooths[-1]


def cascade(roots, multipliers, keep_levels=False):
    """
    Multiplicative cascade: every value V splits into V(1 + m)/2, V(1 - m)/2.

    Parameters
    ----------
    roots : array-like
        Values at the coarsest level.
    multipliers : list of array-like
        Multipliers in [-1, 1] per level, coarsest first; level j has
        ``roots.size * 2**j`` entries.
    keep_levels : bool, optional
        If True, return the values of every level (roots first) instead of
        only the leaves.
    """
    if _backend == 'numpy':
        values = np.asarray(roots, dtype=np.float64)
        levels = [values]
        for m in multipliers:
            m = np.asarray(m, dtype=np.float64)
            values = _interleave(values * (1 + m) / 2, values * (1 - m) / 2)
            levels.append(values)
    else:
        values = _as_tensor(roots)
        levels = [values]
        for m in multipliers:
            m = _as_tensor(m)
            values = _interleave_tensor(values * (1 + m) / 2, values * (1 - m) / 2)
            levels.append(values)
        levels = [v.numpy() for v in levels]

    return levels if keep_levels else levels[-1]


# ============================================================================
# Reductions
# ============================================================================

def mean(x):
    """Mean of array."""
    if _backend == 'numpy':
        return float(np.mean(x))
    else:
        return float(torch.mean(_as_tensor(x)))


def mean_square(x):
    """Mean of squared values."""
    if _backend == 'numpy':
        x = np.asarray(x, dtype=np.float64)
        return float(np.mean(x * x))
    else:
        x_torch = _as_tensor(x)
        return float(torch.mean(x_torch * x_torch))


def std(x, ddof=0):
    """
    Standard deviation.

    Parameters
    ----------
    x : array-like
        Values.
    ddof : int, optional
        Delta degrees of freedom: 0 for the population std, 1 for the sample
        std (n - 1 denominator).
    """
    if _backend == 'numpy':
        return float(np.std(x, ddof=ddof))
    else:
        return float(torch.std(_as_tensor(x), correction=ddof))

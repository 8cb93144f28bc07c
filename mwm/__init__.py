"""
mwm: Multifractal wavelet model for positive long-range-dependent series

This package provides tools for:
- Haar wavelet decomposition of dyadic sequences on a flat-array scale tree
- Estimation of per-scale Beta multiplier shapes from observed data
- Synthesis of non-negative multifractal sequences by multiplicative cascade
"""

__version__ = "0.1.0"

from . import backend, transform, simulation, analysis

# Easy access to main functions
from .backend import set_backend, get_backend, set_num_threads
from .errors import MWMError, InvalidLength, InvalidSequence, InvalidParameters, DegenerateScaleWarning
from .model import ScaleParameters, FittedModel
from .transform import ScaleTree, haar_forward, haar_inverse, haar_decompose, haar_reconstruct
from .simulation import (mwm_synthesize, mwm_cascade, sample_multiplier, sample_multipliers,
                         multiplier_variance, shape_from_variance)
from .analysis import mwm_estimate, detail_moment_analysis, implied_detail_moments

"""
Simulation module for the multifractal wavelet model

Contains the symmetric Beta multiplier sampler and the top-down cascade that
generates non-negative synthetic sequences.
"""

from .multipliers import sample_multiplier, sample_multipliers, multiplier_variance, shape_from_variance
from .synthesis import mwm_synthesize, mwm_cascade

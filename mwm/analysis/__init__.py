"""
Analysis module for the multifractal wavelet model

Contains the per-scale moment analysis and the estimator that fits the
multiplier shapes and root statistics to an observed sequence.
"""

from .estimation import (mwm_estimate, detail_moment_analysis, implied_detail_moments,
                         DEFAULT_MIN_SHAPE, DEFAULT_MAX_SHAPE)

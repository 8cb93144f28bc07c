"""
Transform module for the multifractal wavelet model

Contains the flat-array scale tree and the unnormalized Haar transform that
maps a dyadic sequence to detail coefficients and back.
"""

from .tree import ScaleTree
from .haar import haar_forward, haar_inverse, haar_decompose, haar_reconstruct

"""Proper scoring rules for distributional predictions.

References:
    Gneiting, T. & Raftery, A.E. (2007). Strictly Proper Scoring Rules,
    Prediction, and Estimation. JASA, 102(477), 359-378.
"""

from .rules import crps, crps_mc, crps_normal, crps_sample, log_score

__all__ = [
    "crps",
    "crps_mc",
    "crps_normal",
    "crps_sample",  # ensemble forecasts, e.g. posterior predictive replicates
    "log_score",
]

"""Distribution implementations for sinhasinh.

- Sinh-arcsinh: location, scale, skewness and tail weight (Jones & Pewsey, 2009)
- Normal: Baseline, and the eps=0, delta=1 special case of the sinh-arcsinh family

References:
    Jones, M.C. & Pewsey, A. (2009). Sinh-arcsinh distributions.
    Biometrika, 96(4), 761-780.
"""

from .normal import NormalDistribution
from .sinh_arcsinh import (
    SinhArcsinhDistribution,
    inverse_transform,
    log_density,
    sample,
    sample_n,
    transform,
    validate_parameters,
)

__all__ = [
    "NormalDistribution",
    "SinhArcsinhDistribution",
    "inverse_transform",
    "log_density",
    "sample",
    "sample_n",
    "transform",
    "validate_parameters",
]

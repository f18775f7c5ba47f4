"""Core abstractions for sinhasinh."""

from .distribution import ContinuousDistribution, Distribution, DistributionParameters
from .parameters import NormalParameters, SinhArcsinhParameters

__all__ = [
    "ContinuousDistribution",
    "Distribution",
    "DistributionParameters",
    "NormalParameters",
    "SinhArcsinhParameters",
]

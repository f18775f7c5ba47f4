"""Parameter dataclasses for distribution implementations."""

import math
from dataclasses import dataclass

from .distribution import DistributionParameters
from ..exceptions import DomainError


def _check_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise DomainError(f"{name} must be finite, got {value}")


@dataclass(frozen=True)
class SinhArcsinhParameters(DistributionParameters):
    """
    Parameters for the sinh-arcsinh distribution (Jones & Pewsey, 2009).

    Mathematical form:
        sigma_star = sigma * delta
        y_z = (y - mu) / sigma_star
        S(y) = sinh(eps + delta * asinh(y_z))

        f(y) = phi(S(y)) * delta * sqrt(1 + S(y)^2) / (sigma_star * sqrt(1 + y_z^2))

    sigma acts as a scale parameter independent of the tail weight: the raw
    scale of the transform is sigma_star = sigma * delta.

    Attributes:
        mu: Location parameter (unconstrained)
        sigma: Scale parameter, must be positive
        eps: Skewness parameter (unconstrained). eps=0 gives a symmetric density;
            positive values put the longer tail on the left.
        delta: Tail weight parameter, must be positive. delta=1 with eps=0 gives
            the Normal distribution; delta < 1 gives heavier tails.
    """

    mu: float
    sigma: float
    eps: float = 0.0
    delta: float = 1.0

    def __post_init__(self) -> None:
        _check_finite(mu=self.mu, sigma=self.sigma, eps=self.eps, delta=self.delta)
        if self.sigma <= 0:
            raise DomainError(f"sigma must be positive, got {self.sigma}")
        if self.delta <= 0:
            raise DomainError(f"delta must be positive, got {self.delta}")

    @property
    def sigma_star(self) -> float:
        """Raw scale of the sinh-arcsinh transform."""
        return self.sigma * self.delta

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.mu, self.sigma, self.eps, self.delta)

    def with_mu(self, new_mu: float) -> "SinhArcsinhParameters":
        """Return new params with updated mu."""
        return SinhArcsinhParameters(mu=new_mu, sigma=self.sigma, eps=self.eps, delta=self.delta)

    def with_sigma(self, new_sigma: float) -> "SinhArcsinhParameters":
        """Return new params with updated sigma (scale)."""
        return SinhArcsinhParameters(mu=self.mu, sigma=new_sigma, eps=self.eps, delta=self.delta)

    def with_eps(self, new_eps: float) -> "SinhArcsinhParameters":
        """Return new params with updated eps (skewness)."""
        return SinhArcsinhParameters(mu=self.mu, sigma=self.sigma, eps=new_eps, delta=self.delta)

    def with_delta(self, new_delta: float) -> "SinhArcsinhParameters":
        """Return new params with updated delta (tail weight)."""
        return SinhArcsinhParameters(mu=self.mu, sigma=self.sigma, eps=self.eps, delta=new_delta)


@dataclass(frozen=True)
class NormalParameters(DistributionParameters):
    """
    Parameters for the Normal (Gaussian) distribution.

    Attributes:
        mu: Mean
        sigma: Standard deviation, must be positive
    """

    mu: float
    sigma: float

    def __post_init__(self) -> None:
        _check_finite(mu=self.mu, sigma=self.sigma)
        if self.sigma <= 0:
            raise DomainError(f"sigma must be positive, got {self.sigma}")

    def with_mu(self, new_mu: float) -> "NormalParameters":
        """Return new params with updated mu."""
        return NormalParameters(mu=new_mu, sigma=self.sigma)

    def with_sigma(self, new_sigma: float) -> "NormalParameters":
        """Return new params with updated sigma."""
        return NormalParameters(mu=self.mu, sigma=new_sigma)

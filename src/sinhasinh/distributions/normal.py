"""Normal (Gaussian) distribution."""

import numpy as np
from numpy.typing import NDArray
from scipy.stats import norm

from ..core.distribution import ContinuousDistribution
from ..core.parameters import NormalParameters


class NormalDistribution(ContinuousDistribution[NormalParameters]):
    """
    Normal (Gaussian) distribution.

    Mathematical formulation:
        f(x) = (1 / (sigma * sqrt(2*pi))) * exp(-(x - mu)^2 / (2*sigma^2))

    Use cases:
    - Baseline family for model comparison
    - Reference density for the eps=0, delta=1 sinh-arcsinh special case
    """

    @property
    def name(self) -> str:
        return "Normal (Gaussian)"

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return ("mu", "sigma")

    def logpdf(
        self,
        x: NDArray[np.float64],
        params: NormalParameters,
    ) -> NDArray[np.float64]:
        """
        Evaluate the log density at values x.

        Args:
            x: Array of values to evaluate
            params: Distribution parameters

        Returns:
            Array of log density values
        """
        return norm.logpdf(x, loc=params.mu, scale=params.sigma)

    def cdf(
        self,
        x: NDArray[np.float64],
        params: NormalParameters,
    ) -> NDArray[np.float64]:
        return norm.cdf(x, loc=params.mu, scale=params.sigma)

    def ppf(
        self,
        q: NDArray[np.float64] | float,
        params: NormalParameters,
    ) -> NDArray[np.float64] | float:
        """
        Evaluate the quantile function (inverse CDF) at probability q.

        Args:
            q: Probability value(s) between 0 and 1
            params: Distribution parameters

        Returns:
            Quantile value(s)
        """
        return norm.ppf(q, loc=params.mu, scale=params.sigma)

    def sample(
        self,
        n: int,
        params: NormalParameters,
        rng: np.random.Generator | None = None,
    ) -> NDArray[np.float64]:
        """
        Draw n samples from the Normal distribution.

        Args:
            n: Number of samples
            params: Distribution parameters
            rng: Random number generator (optional)

        Returns:
            Array of n samples
        """
        if rng is None:
            rng = np.random.default_rng()
        return rng.normal(loc=params.mu, scale=params.sigma, size=n)

    def mean(self, params: NormalParameters) -> float:
        return float(params.mu)

    def var(self, params: NormalParameters) -> float:
        return float(params.sigma**2)

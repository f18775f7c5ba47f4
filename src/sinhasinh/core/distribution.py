"""Base distribution protocol and abstract class."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TypeVar, Generic, Protocol, runtime_checkable
import numpy as np
from numpy.typing import NDArray, ArrayLike


@dataclass(frozen=True)
class DistributionParameters:
    """
    Base class for distribution parameters.

    All parameter classes should inherit from this and use frozen=True
    for immutability.
    """

    pass


P = TypeVar("P", bound=DistributionParameters)


@runtime_checkable
class Distribution(Protocol):
    """
    Protocol that all distributions must implement.

    This is the minimal interface required by the scoring rules,
    model comparison and plotting utilities.
    """

    def logpdf(self, x: ArrayLike, params: DistributionParameters) -> ArrayLike:
        """Log probability density function."""
        ...

    def pdf(self, x: ArrayLike, params: DistributionParameters) -> ArrayLike:
        """Probability density function."""
        ...

    def cdf(self, x: ArrayLike, params: DistributionParameters) -> ArrayLike:
        """Cumulative distribution function."""
        ...

    def ppf(self, q: ArrayLike, params: DistributionParameters) -> ArrayLike:
        """Percent point function (inverse CDF / quantile function)."""
        ...

    def sample(
        self,
        n: int,
        params: DistributionParameters,
        rng: np.random.Generator | None = None,
    ) -> ArrayLike:
        """Generate random samples."""
        ...


class ContinuousDistribution(ABC, Generic[P]):
    """
    Abstract base class for univariate continuous distributions on the real line.

    Subclasses provide the log density, CDF, quantile function and a sampler;
    the density and grid-integrated moments are derived here.

    Type Parameters:
        P: The parameter class for this distribution (must inherit from DistributionParameters)

    Example:
        >>> class MyDistribution(ContinuousDistribution[MyParameters]):
        ...     def logpdf(self, x, params):
        ...         # implementation
        ...         pass
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable distribution name."""
        ...

    @property
    @abstractmethod
    def parameter_names(self) -> tuple[str, ...]:
        """Names of the distribution parameters."""
        ...

    @abstractmethod
    def logpdf(
        self,
        x: NDArray[np.float64],
        params: P,
    ) -> NDArray[np.float64]:
        """
        Evaluate the log density at values x.

        Args:
            x: Array of values to evaluate
            params: Distribution parameters

        Returns:
            Array of log density values
        """
        ...

    @abstractmethod
    def cdf(self, x: NDArray[np.float64], params: P) -> NDArray[np.float64]:
        ...

    @abstractmethod
    def ppf(self, q: NDArray[np.float64], params: P) -> NDArray[np.float64]:
        ...

    @abstractmethod
    def sample(
        self,
        n: int,
        params: P,
        rng: np.random.Generator | None = None,
    ) -> NDArray[np.float64]:
        ...

    def pdf(
        self,
        x: NDArray[np.float64],
        params: P,
    ) -> NDArray[np.float64]:
        """
        Evaluate the PDF at values x.

        Args:
            x: Array of values to evaluate
            params: Distribution parameters

        Returns:
            Array of probability density values (normalized to integrate to 1)
        """
        return np.exp(self.logpdf(x, params))

    def expected_value(
        self,
        x: NDArray[np.float64],
        params: P,
    ) -> float:
        """
        Calculate expected value E[X] by integrating over the grid x.

        Args:
            x: Array of values for integration
            params: Distribution parameters

        Returns:
            Expected value
        """
        pdf_values = self.pdf(x, params)
        return float(np.trapezoid(x * pdf_values, x))

    def variance(
        self,
        x: NDArray[np.float64],
        params: P,
    ) -> float:
        """
        Calculate variance Var[X] by integrating over the grid x.

        Args:
            x: Array of values for integration
            params: Distribution parameters

        Returns:
            Variance
        """
        pdf_values = self.pdf(x, params)
        mean = self.expected_value(x, params)
        return float(np.trapezoid((x - mean) ** 2 * pdf_values, x))

    def std(self, x: NDArray[np.float64], params: P) -> float:
        """Standard deviation over the grid x."""
        return float(np.sqrt(self.variance(x, params)))

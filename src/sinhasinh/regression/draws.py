"""Posterior draws structure and the per-observation family entry points.

A PosteriorDraws holds, for every distributional parameter, a matrix of shape
(n_draws, n_obs): row d is one posterior draw, column i is observation i.
The log-likelihood and posterior-predictive entry points take an observation
index and a draws structure and return one value per draw.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.stats import norm

from ..distributions.sinh_arcsinh import log_density, sample_n, validate_parameters


@dataclass(frozen=True)
class PosteriorDraws:
    """
    Posterior draws of the distributional parameters plus the observed response.

    Inputs are copied on construction; the stored mapping and arrays are read-only.

    Attributes:
        dpars: Parameter name -> array of shape (n_draws, n_obs)
        y: Observed response, shape (n_obs,)

    Example:
        >>> draws = PosteriorDraws(
        ...     dpars={"mu": mu_draws, "sigma": sigma_draws},
        ...     y=data["y"].to_numpy(),
        ... )
        >>> draws.column("mu", 0)  # all draws of mu for observation 0
    """

    dpars: Mapping[str, NDArray[np.float64]]
    y: NDArray[np.float64] = field(repr=False)

    def __post_init__(self) -> None:
        dpars = {
            name: np.atleast_2d(np.array(values, dtype=np.float64))
            for name, values in self.dpars.items()
        }
        y = np.atleast_1d(np.array(self.y, dtype=np.float64))
        if not dpars:
            raise ValueError("dpars must contain at least one parameter")

        shapes = {name: values.shape for name, values in dpars.items()}
        first = next(iter(shapes.values()))
        if any(shape != first for shape in shapes.values()):
            raise ValueError(f"All dpars must share one (n_draws, n_obs) shape, got {shapes}")
        if first[1] != len(y):
            raise ValueError(
                f"dpars have {first[1]} observations but y has {len(y)}"
            )

        for values in (*dpars.values(), y):
            values.flags.writeable = False
        object.__setattr__(self, "dpars", MappingProxyType(dpars))
        object.__setattr__(self, "y", y)

    @property
    def n_draws(self) -> int:
        return next(iter(self.dpars.values())).shape[0]

    @property
    def n_obs(self) -> int:
        return len(self.y)

    def column(self, name: str, i: int) -> NDArray[np.float64]:
        """All draws of parameter `name` for observation i."""
        return self.dpars[name][:, i]

    @classmethod
    def from_parameter_rows(
        cls,
        rows: Sequence[Sequence[float]],
        y: float,
        names: Sequence[str] = ("mu", "sigma", "eps", "delta"),
    ) -> "PosteriorDraws":
        """
        Build a single-observation draws structure from parameter tuples.

        Args:
            rows: One (mu, sigma, eps, delta)-style tuple per draw
            y: The observation
            names: Parameter names, in tuple order

        Returns:
            PosteriorDraws with n_obs == 1
        """
        table = np.asarray(rows, dtype=np.float64).reshape(len(rows), len(names))
        return cls(
            dpars={name: table[:, [j]] for j, name in enumerate(names)},
            y=np.array([y], dtype=np.float64),
        )


def log_lik_sinhasinh(i: int, draws: PosteriorDraws) -> NDArray[np.float64]:
    """Pointwise sinh-arcsinh log-likelihood of observation i, one value per draw."""
    mu = draws.column("mu", i)
    sigma = draws.column("sigma", i)
    eps = draws.column("eps", i)
    delta = draws.column("delta", i)
    y = draws.y[i]
    return np.atleast_1d(np.asarray(log_density(y, mu, sigma, eps, delta)))


def predict_sinhasinh(
    i: int,
    draws: PosteriorDraws,
    rng: np.random.Generator,
) -> NDArray[np.float64]:
    """Posterior predictive draws for observation i, one value per draw."""
    mu = draws.column("mu", i)
    sigma = draws.column("sigma", i)
    eps = draws.column("eps", i)
    delta = draws.column("delta", i)
    return sample_n(rng, mu, sigma, eps, delta, n=draws.n_draws)


def gaussian_log_density(
    y: ArrayLike,
    mu: ArrayLike,
    sigma: ArrayLike,
) -> NDArray[np.float64]:
    """Normal log density with the same domain checks as the sinh-arcsinh one."""
    validate_parameters(sigma, 1.0)
    return norm.logpdf(y, loc=mu, scale=sigma)


def gaussian_sample_n(
    rng: np.random.Generator,
    mu: ArrayLike,
    sigma: ArrayLike,
    n: int | None = None,
) -> NDArray[np.float64]:
    validate_parameters(sigma, 1.0)
    if n is None:
        n = int(np.broadcast(mu, sigma).size)
    return np.atleast_1d(rng.normal(loc=mu, scale=sigma, size=n))


def log_lik_gaussian(i: int, draws: PosteriorDraws) -> NDArray[np.float64]:
    mu = draws.column("mu", i)
    sigma = draws.column("sigma", i)
    return gaussian_log_density(draws.y[i], mu, sigma)


def predict_gaussian(
    i: int,
    draws: PosteriorDraws,
    rng: np.random.Generator,
) -> NDArray[np.float64]:
    mu = draws.column("mu", i)
    sigma = draws.column("sigma", i)
    return gaussian_sample_n(rng, mu, sigma, n=draws.n_draws)

"""Family descriptors for distributional regression.

A family bundles everything a regression backend needs to use a custom
outcome distribution: the ordered distributional parameters (the first is
the location modeled by the main formula), one link per parameter, the
parameter lower bounds, the support of the response, and the pointwise
log-likelihood and posterior-predictive functions.

Families are plain values built by constructor functions and handed to the
fitting code explicitly; nothing is registered globally.

Example:
    >>> family = sinhasinh_family()
    >>> family.dpars
    ('mu', 'sigma', 'eps', 'delta')
    >>> family.link_for("sigma").name
    'log'
    >>> model = DistributionalRegression(family, formula)
"""

from dataclasses import dataclass, field
from typing import Callable, Mapping

import numpy as np
from numpy.typing import NDArray

from .draws import (
    PosteriorDraws,
    gaussian_log_density,
    gaussian_sample_n,
    log_lik_gaussian,
    log_lik_sinhasinh,
    predict_gaussian,
    predict_sinhasinh,
)
from .links import Link, get_link
from .stan_code import stan_functions
from ..distributions.sinh_arcsinh import log_density, sample_n
from ..exceptions import FamilyError

LogLikFunction = Callable[[int, PosteriorDraws], NDArray[np.float64]]
PredictFunction = Callable[[int, PosteriorDraws, np.random.Generator], NDArray[np.float64]]
DensityFunction = Callable[..., NDArray[np.float64]]
SamplerFunction = Callable[..., NDArray[np.float64]]

SUPPORTED_TYPES = ("real",)


@dataclass(frozen=True)
class CustomFamily:
    """
    Capability descriptor of a response distribution.

    Attributes:
        name: Family name
        dpars: Ordered distributional parameter names; dpars[0] is the location
        links: Link name per parameter ("identity" or "log")
        lower_bounds: Per-parameter lower bound; None means unconstrained and
            0.0 means strictly positive
        log_lik: (i, draws) -> log-likelihood of observation i per draw
        posterior_predict: (i, draws, rng) -> one predictive draw per draw
        log_density: (y, *dpars) -> log density, vectorized over observations
        sampler: (rng, *dpars, n=...) -> n draws, vectorized over parameter rows
        support: Response type, "real" for the whole real line
        stan_functions: Stan source of the family's _lpdf/_rng functions
    """

    name: str
    dpars: tuple[str, ...]
    links: tuple[str, ...]
    lower_bounds: tuple[float | None, ...]
    log_lik: LogLikFunction = field(compare=False, repr=False)
    posterior_predict: PredictFunction = field(compare=False, repr=False)
    log_density: DensityFunction = field(compare=False, repr=False)
    sampler: SamplerFunction = field(compare=False, repr=False)
    support: str = "real"
    stan_functions: str = field(default="", compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.dpars:
            raise FamilyError("A family needs at least one distributional parameter")
        if len(set(self.dpars)) != len(self.dpars):
            raise FamilyError(f"Duplicate parameter names in {self.dpars}")
        if len(self.links) != len(self.dpars):
            raise FamilyError(
                f"Expected {len(self.dpars)} links, got {len(self.links)}"
            )
        if len(self.lower_bounds) != len(self.dpars):
            raise FamilyError(
                f"Expected {len(self.dpars)} lower bounds, got {len(self.lower_bounds)}"
            )
        for link_name in self.links:
            get_link(link_name)
        if self.support not in SUPPORTED_TYPES:
            raise FamilyError(
                f"Unsupported response type: '{self.support}'. Use one of {SUPPORTED_TYPES}"
            )

    @property
    def location_parameter(self) -> str:
        """The parameter modeled by the main regression formula."""
        return self.dpars[0]

    def link_for(self, dpar: str) -> Link:
        """Link of parameter `dpar`."""
        try:
            index = self.dpars.index(dpar)
        except ValueError:
            raise FamilyError(
                f"Family '{self.name}' has no parameter '{dpar}'. Parameters: {self.dpars}"
            ) from None
        return get_link(self.links[index])

    def check_draws(self, draws: PosteriorDraws) -> None:
        missing = [name for name in self.dpars if name not in draws.dpars]
        if missing:
            raise FamilyError(f"Draws are missing parameters {missing} of family '{self.name}'")

    def log_lik_matrix(self, draws: PosteriorDraws) -> NDArray[np.float64]:
        """
        Pointwise log-likelihood for every draw and observation.

        Returns:
            Array of shape (n_draws, n_obs)
        """
        self.check_draws(draws)
        columns = [self.log_lik(i, draws) for i in range(draws.n_obs)]
        return np.column_stack(columns) if columns else np.empty((draws.n_draws, 0))

    def predict_matrix(
        self,
        draws: PosteriorDraws,
        rng: np.random.Generator | None = None,
    ) -> NDArray[np.float64]:
        """
        Posterior predictive replicates for every draw and observation.

        Returns:
            Array of shape (n_draws, n_obs)
        """
        self.check_draws(draws)
        if rng is None:
            rng = np.random.default_rng()
        columns = [self.posterior_predict(i, draws, rng) for i in range(draws.n_obs)]
        return np.column_stack(columns) if columns else np.empty((draws.n_draws, 0))


def sinhasinh_family() -> CustomFamily:
    """
    The four-parameter sinh-arcsinh family.

    mu and eps are unconstrained (identity link); sigma and delta are
    strictly positive (log link).
    """
    return CustomFamily(
        name="sinhasinh",
        dpars=("mu", "sigma", "eps", "delta"),
        links=("identity", "log", "identity", "log"),
        lower_bounds=(None, 0.0, None, 0.0),
        log_lik=log_lik_sinhasinh,
        posterior_predict=predict_sinhasinh,
        log_density=log_density,
        sampler=sample_n,
        support="real",
        stan_functions=stan_functions(normalized=True),
    )


def gaussian_family() -> CustomFamily:
    """The Normal family with identity-linked mean and log-linked sd."""
    return CustomFamily(
        name="gaussian",
        dpars=("mu", "sigma"),
        links=("identity", "log"),
        lower_bounds=(None, 0.0),
        log_lik=log_lik_gaussian,
        posterior_predict=predict_gaussian,
        log_density=gaussian_log_density,
        sampler=gaussian_sample_n,
        support="real",
    )


_CONSTRUCTORS: Mapping[str, Callable[[], CustomFamily]] = {
    "sinhasinh": sinhasinh_family,
    "gaussian": gaussian_family,
}


def family_from_name(name: str) -> CustomFamily:
    """
    Construct a family by name.

    Raises:
        FamilyError: If the name is unknown
    """
    constructor = _CONSTRUCTORS.get(name.lower())
    if constructor is None:
        raise FamilyError(
            f"Unknown family: '{name}'. Available: {sorted(_CONSTRUCTORS)}"
        )
    return constructor()

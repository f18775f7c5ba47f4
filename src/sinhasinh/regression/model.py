"""Maximum-likelihood distributional regression with any CustomFamily.

Every distributional parameter gets its own linear predictor, mapped through
the family's link. Coefficients are estimated by maximum likelihood and their
uncertainty by the normal (Laplace) approximation at the optimum; drawing
from that approximation yields a PosteriorDraws structure that feeds the
family's log-likelihood and posterior-predictive entry points.

Example:
    >>> family = sinhasinh_family()
    >>> formula = DistributionalFormula("y", {"mu": ("x",), "sigma": ("x",)})
    >>> model = DistributionalRegression(family, formula).fit(data)
    >>> model.coefficients["sigma"]
    >>> y_rep = model.posterior_predict(n_draws=200)
"""

import logging
import warnings
from dataclasses import dataclass
from typing import Callable

import numpy as np
import pandas as pd
from numpy.typing import NDArray
from scipy import optimize

from .draws import PosteriorDraws
from .family import CustomFamily
from .formula import DistributionalFormula, design_matrix
from ..exceptions import DomainError, NotFittedError
from ..scoring.rules import crps_sample

logger = logging.getLogger(__name__)

_PENALTY = 1e10
_METHODS = ("BFGS", "L-BFGS-B", "Nelder-Mead", "Powell")


@dataclass
class FitConfig:
    """
    Optimizer settings for DistributionalRegression.

    Attributes:
        method: scipy.optimize.minimize method
        maxiter: Maximum optimizer iterations
        tol: Optimizer tolerance (None uses the scipy default)
        n_draws: Default number of approximate posterior draws
        hessian_step: Finite-difference step for the Hessian at the optimum
    """

    method: str = "BFGS"
    maxiter: int = 5000
    tol: float | None = None
    n_draws: int = 1000
    hessian_step: float = 1e-4

    def __post_init__(self) -> None:
        if self.method not in _METHODS:
            raise ValueError(f"method must be one of {_METHODS}, got '{self.method}'")
        if self.maxiter < 1:
            raise ValueError(f"maxiter must be at least 1, got {self.maxiter}")
        if self.n_draws < 1:
            raise ValueError(f"n_draws must be at least 1, got {self.n_draws}")
        if self.hessian_step <= 0:
            raise ValueError(f"hessian_step must be positive, got {self.hessian_step}")


def numerical_hessian(
    func: Callable[[NDArray[np.float64]], float],
    theta: NDArray[np.float64],
    step: float = 1e-4,
) -> NDArray[np.float64]:
    """Central-difference Hessian of a scalar function."""
    theta = np.asarray(theta, dtype=np.float64)
    k = len(theta)
    hessian = np.empty((k, k))
    f0 = func(theta)

    for a in range(k):
        e_a = np.zeros(k)
        e_a[a] = step
        hessian[a, a] = (func(theta + e_a) - 2.0 * f0 + func(theta - e_a)) / step**2
        for b in range(a + 1, k):
            e_b = np.zeros(k)
            e_b[b] = step
            value = (
                func(theta + e_a + e_b)
                - func(theta + e_a - e_b)
                - func(theta - e_a + e_b)
                + func(theta - e_a - e_b)
            ) / (4.0 * step**2)
            hessian[a, b] = value
            hessian[b, a] = value

    return hessian


class DistributionalRegression:
    """
    Distributional regression: every parameter of the response distribution
    is a (linked) linear function of covariates.

    Args:
        family: Response family, e.g. sinhasinh_family()
        formula: Covariates per distributional parameter
        config: Optimizer settings
    """

    def __init__(
        self,
        family: CustomFamily,
        formula: DistributionalFormula,
        config: FitConfig | None = None,
    ):
        unknown = [name for name in formula.terms if name not in family.dpars]
        if unknown:
            raise ValueError(
                f"Formula names parameters {unknown} not in family '{family.name}' {family.dpars}"
            )
        self.family = family
        self.formula = formula
        self.config = config if config is not None else FitConfig()

        self._theta: NDArray[np.float64] | None = None
        self._cov: NDArray[np.float64] | None = None
        self._frame: pd.DataFrame | None = None
        self._result: optimize.OptimizeResult | None = None
        self._converged = False

    def __repr__(self) -> str:
        return (
            f"DistributionalRegression(family='{self.family.name}', "
            f"formula='{self.formula.describe(self.family.dpars)}')"
        )

    # ------------------------------------------------------------------
    # Parameter layout
    # ------------------------------------------------------------------

    def _slices(self) -> dict[str, slice]:
        slices = {}
        start = 0
        for dpar in self.family.dpars:
            width = len(self.formula.term_names(dpar))
            slices[dpar] = slice(start, start + width)
            start += width
        return slices

    @property
    def n_coefficients(self) -> int:
        return sum(len(self.formula.term_names(dpar)) for dpar in self.family.dpars)

    def _designs(self, frame: pd.DataFrame) -> dict[str, NDArray[np.float64]]:
        return {
            dpar: design_matrix(frame, self.formula.covariates(dpar))
            for dpar in self.family.dpars
        }

    def _parameters(
        self,
        theta: NDArray[np.float64],
        designs: dict[str, NDArray[np.float64]],
    ) -> dict[str, NDArray[np.float64]]:
        """Link-inverted parameter values; theta may be (k,) or (n_draws, k)."""
        slices = self._slices()
        values = {}
        for dpar in self.family.dpars:
            eta = theta[..., slices[dpar]] @ designs[dpar].T
            with np.errstate(over="ignore"):
                values[dpar] = self.family.link_for(dpar).inverse(eta)
        return values

    def _initial_theta(self, y: NDArray[np.float64]) -> NDArray[np.float64]:
        theta = np.zeros(self.n_coefficients)
        slices = self._slices()
        location = self.family.location_parameter
        theta[slices[location].start] = self.family.link_for(location).forward(np.mean(y))
        if "sigma" in self.family.dpars:
            scale = max(float(np.std(y)), 1e-6)
            theta[slices["sigma"].start] = self.family.link_for("sigma").forward(scale)
        return theta

    def _negative_log_likelihood(
        self,
        theta: NDArray[np.float64],
        designs: dict[str, NDArray[np.float64]],
        y: NDArray[np.float64],
    ) -> float:
        params = self._parameters(theta, designs)
        try:
            lp = self.family.log_density(y, *(params[dpar] for dpar in self.family.dpars))
        except DomainError:
            # exp() underflow of a log-linked parameter
            return _PENALTY
        total = float(np.sum(lp))
        if not np.isfinite(total):
            return _PENALTY
        return -total

    # ------------------------------------------------------------------
    # Fitting
    # ------------------------------------------------------------------

    def fit(self, frame: pd.DataFrame) -> "DistributionalRegression":
        """
        Estimate coefficients by maximum likelihood.

        Args:
            frame: Data containing the response and all covariates

        Returns:
            self (for chaining)
        """
        if self.formula.response not in frame.columns:
            raise KeyError(f"Response column '{self.formula.response}' not found in DataFrame")

        y = frame[self.formula.response].to_numpy(dtype=np.float64)
        if not np.all(np.isfinite(y)):
            raise ValueError("Response contains non-finite values")
        designs = self._designs(frame)

        def objective(theta: NDArray[np.float64]) -> float:
            return self._negative_log_likelihood(theta, designs, y)

        theta0 = self._initial_theta(y)
        logger.info(
            "Fitting %s with %d coefficients on %d observations",
            self, len(theta0), len(y),
        )

        result = optimize.minimize(
            objective,
            theta0,
            method=self.config.method,
            tol=self.config.tol,
            options={"maxiter": self.config.maxiter},
        )
        converged = bool(result.success) or "precision loss" in str(result.message)
        if not converged:
            message = f"Optimizer did not converge for family '{self.family.name}': {result.message}"
            logger.warning(message)
            warnings.warn(message)

        hessian = numerical_hessian(objective, result.x, self.config.hessian_step)
        self._cov = self._invert_hessian(hessian)
        self._theta = np.asarray(result.x, dtype=np.float64)
        self._result = result
        self._converged = converged
        self._frame = frame

        logger.info("Fit finished: log-likelihood %.4f after %d iterations", -result.fun, result.nit)
        return self

    @staticmethod
    def _invert_hessian(hessian: NDArray[np.float64]) -> NDArray[np.float64]:
        hessian = 0.5 * (hessian + hessian.T)
        eigenvalues = np.linalg.eigvalsh(hessian)
        if np.all(eigenvalues > 0):
            return np.linalg.inv(hessian)

        message = "Hessian is not positive definite; using pseudo-inverse of its positive part"
        logger.warning(message)
        warnings.warn(message)
        values, vectors = np.linalg.eigh(hessian)
        inv_values = np.where(values > 1e-10, 1.0 / np.maximum(values, 1e-10), 0.0)
        return (vectors * inv_values) @ vectors.T

    def _check_fitted(self) -> None:
        if self._theta is None or self._cov is None:
            raise NotFittedError("Model not fitted. Call fit() first.")

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    @property
    def converged(self) -> bool:
        self._check_fitted()
        return self._converged

    @property
    def log_likelihood(self) -> float:
        """Maximized log-likelihood."""
        self._check_fitted()
        return float(-self._result.fun)

    @property
    def aic(self) -> float:
        return 2.0 * self.n_coefficients - 2.0 * self.log_likelihood

    @property
    def coefficients(self) -> dict[str, pd.Series]:
        """Estimated coefficients per parameter, on the linear predictor scale."""
        self._check_fitted()
        slices = self._slices()
        return {
            dpar: pd.Series(
                self._theta[slices[dpar]],
                index=list(self.formula.term_names(dpar)),
                name=dpar,
            )
            for dpar in self.family.dpars
        }

    def coef_table(self) -> pd.DataFrame:
        """Estimates and standard errors, one row per coefficient."""
        self._check_fitted()
        std_errors = np.sqrt(np.clip(np.diag(self._cov), 0.0, None))
        rows = []
        for dpar, sl in self._slices().items():
            for term, estimate, se in zip(
                self.formula.term_names(dpar), self._theta[sl], std_errors[sl]
            ):
                rows.append({"dpar": dpar, "term": term, "estimate": estimate, "std_error": se})
        return pd.DataFrame(rows)

    def summary(self) -> str:
        """Return formatted summary table."""
        self._check_fitted()
        lines = [
            f"Family: {self.family.name}",
            f"Formula: {self.formula.describe(self.family.dpars)}",
            f"Log-likelihood: {self.log_likelihood:.4f}   AIC: {self.aic:.4f}",
            "=" * 50,
        ]
        for row in self.coef_table().itertuples(index=False):
            name = f"{row.dpar}_{row.term}" if row.dpar != self.family.location_parameter else row.term
            lines.append(f"  {name:20s}: {row.estimate:9.4f} (+/- {row.std_error:.4f})")
        return "\n".join(lines)

    def predict_parameters(self, frame: pd.DataFrame | None = None) -> pd.DataFrame:
        """
        Point estimates of every distributional parameter.

        Args:
            frame: Covariates (defaults to the training data)

        Returns:
            DataFrame with one column per parameter, indexed like frame
        """
        self._check_fitted()
        frame = self._frame if frame is None else frame
        values = self._parameters(self._theta, self._designs(frame))
        return pd.DataFrame(values, index=frame.index, columns=list(self.family.dpars))

    def posterior_draws(
        self,
        frame: pd.DataFrame | None = None,
        n_draws: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> PosteriorDraws:
        """
        Approximate posterior draws of all parameters for every row of frame.

        Coefficients are drawn from N(theta_hat, H^-1) and pushed through the
        linear predictors and links.

        Args:
            frame: Covariates, plus the response if log-likelihoods are wanted
                (defaults to the training data)
            n_draws: Number of draws (defaults to config.n_draws)
            rng: Random number generator

        Returns:
            PosteriorDraws with arrays of shape (n_draws, len(frame))
        """
        self._check_fitted()
        frame = self._frame if frame is None else frame
        n_draws = self.config.n_draws if n_draws is None else n_draws
        if n_draws < 1:
            raise ValueError(f"n_draws must be at least 1, got {n_draws}")
        if rng is None:
            rng = np.random.default_rng()

        theta_draws = rng.multivariate_normal(
            self._theta, self._cov, size=n_draws, method="eigh"
        )
        values = self._parameters(theta_draws, self._designs(frame))

        if self.formula.response in frame.columns:
            y = frame[self.formula.response].to_numpy(dtype=np.float64)
        else:
            y = np.full(len(frame), np.nan)
        return PosteriorDraws(dpars=values, y=y)

    def log_lik(
        self,
        frame: pd.DataFrame | None = None,
        n_draws: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> NDArray[np.float64]:
        """Pointwise log-likelihood matrix of shape (n_draws, n_obs)."""
        draws = self.posterior_draws(frame, n_draws, rng)
        return self.family.log_lik_matrix(draws)

    def posterior_predict(
        self,
        frame: pd.DataFrame | None = None,
        n_draws: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> NDArray[np.float64]:
        """Posterior predictive replicates of shape (n_draws, n_obs)."""
        if rng is None:
            rng = np.random.default_rng()
        draws = self.posterior_draws(frame, n_draws, rng)
        return self.family.predict_matrix(draws, rng)

    def crps(
        self,
        frame: pd.DataFrame | None = None,
        n_draws: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> NDArray[np.float64]:
        """
        Pointwise CRPS of the posterior predictive distribution.

        Scores the observed response of each row against its posterior
        predictive replicates with crps_sample().

        Args:
            frame: Covariates and response (defaults to the training data)
            n_draws: Number of replicates (defaults to config.n_draws)
            rng: Random number generator

        Returns:
            Array of shape (n_obs,), lower is better

        Raises:
            ValueError: If frame has no finite response to score
        """
        self._check_fitted()
        frame = self._frame if frame is None else frame
        if self.formula.response not in frame.columns:
            raise ValueError(f"Response column '{self.formula.response}' needed for CRPS")
        y = frame[self.formula.response].to_numpy(dtype=np.float64)
        if not np.all(np.isfinite(y)):
            raise ValueError("Response contains non-finite values")

        y_rep = self.posterior_predict(frame, n_draws, rng)
        return np.atleast_1d(crps_sample(y, y_rep))

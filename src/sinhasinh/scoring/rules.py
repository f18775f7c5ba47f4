"""Proper scoring rules for predictive distributions.

Two views of the same forecast are supported: a distribution object with
closed-form CDF and quantile function, and an ensemble of predictive draws
such as the replicates returned by DistributionalRegression.posterior_predict.
Lower scores are better throughout.

References:
    Gneiting, T. & Raftery, A.E. (2007). Strictly Proper Scoring Rules,
    Prediction, and Estimation. JASA, 102(477), 359-378.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import integrate, stats

from ..core.distribution import Distribution

_TAIL_PROBABILITY = 1e-6


def _as_output(scores: NDArray[np.float64]) -> float | NDArray[np.float64]:
    return float(scores[0]) if scores.size == 1 else scores


def log_score(
    dist: Distribution,
    params: object,
    y: ArrayLike,
) -> float | NDArray[np.float64]:
    """
    Negative log density of the observation(s), -log p(y).

    Strictly proper and local. Observations where the density underflows
    score +inf.
    """
    y = np.atleast_1d(np.asarray(y, dtype=np.float64))
    return _as_output(-np.atleast_1d(np.asarray(dist.logpdf(y, params), dtype=np.float64)))


def crps(
    dist: Distribution,
    params: object,
    y: ArrayLike,
) -> float | NDArray[np.float64]:
    """
    Continuous Ranked Probability Score by quadrature of the CDF.

        CRPS(F, y) = int_{-inf}^{y} F(x)^2 dx + int_{y}^{inf} (1 - F(x))^2 dx

    The integrals run between the 1e-6 and 1 - 1e-6 quantiles. An observation
    beyond that range adds its distance to the range, where F is ~0 or ~1.

    Args:
        dist: Distribution with cdf and ppf
        params: Distribution parameters
        y: Observation(s)

    Returns:
        CRPS per observation, in the units of y
    """
    y = np.atleast_1d(np.asarray(y, dtype=np.float64))
    lower, upper = (
        float(np.atleast_1d(dist.ppf(np.array([q]), params))[0])
        for q in (_TAIL_PROBABILITY, 1.0 - _TAIL_PROBABILITY)
    )

    def below(x: float) -> float:
        return float(np.atleast_1d(dist.cdf(np.array([x]), params))[0]) ** 2

    def above(x: float) -> float:
        return (1.0 - float(np.atleast_1d(dist.cdf(np.array([x]), params))[0])) ** 2

    scores = np.empty(y.size)
    for i, value in enumerate(y):
        split = min(max(value, lower), upper)
        left, _ = integrate.quad(below, lower, split, limit=100)
        right, _ = integrate.quad(above, split, upper, limit=100)
        scores[i] = left + right + max(lower - value, 0.0) + max(value - upper, 0.0)

    return _as_output(scores)


def crps_sample(
    y: ArrayLike,
    samples: ArrayLike,
) -> float | NDArray[np.float64]:
    """
    CRPS of an ensemble forecast.

        CRPS = E|X - y| - 0.5 * E|X - X'|

    with expectations over the empirical distribution of the draws. E|X - X'|
    uses the sorted-sample identity
        E|X - X'| = 2 / m^2 * sum_k (2k - m - 1) * x_(k)
    so the cost is O(m log m) per observation.

    Args:
        y: Observations, shape (n_obs,)
        samples: Draws of shape (n_draws, n_obs), one column per observation,
            or shape (n_draws,) for one forecast shared by every observation

    Returns:
        CRPS per observation

    Example:
        >>> y_rep = model.posterior_predict(n_draws=500)
        >>> crps_sample(data["y"], y_rep).mean()
    """
    y = np.atleast_1d(np.asarray(y, dtype=np.float64))
    samples = np.asarray(samples, dtype=np.float64)
    if samples.ndim == 1:
        samples = samples[:, np.newaxis]
    elif samples.ndim != 2:
        raise ValueError(f"samples must be 1-D or 2-D, got shape {samples.shape}")
    if samples.shape[1] not in (1, y.size):
        raise ValueError(
            f"samples have {samples.shape[1]} columns but y has {y.size} observations"
        )

    m = samples.shape[0]
    if m == 0:
        raise ValueError("samples must contain at least one draw")

    spread_to_obs = np.mean(np.abs(samples - y), axis=0)
    weights = (2.0 * np.arange(1, m + 1) - m - 1)[:, np.newaxis]
    spread_within = 2.0 / m**2 * np.sum(weights * np.sort(samples, axis=0), axis=0)

    return _as_output(np.asarray(spread_to_obs - 0.5 * spread_within))


def crps_mc(
    dist: Distribution,
    params: object,
    y: ArrayLike,
    n_samples: int = 10000,
    rng: np.random.Generator | None = None,
) -> float | NDArray[np.float64]:
    """Monte Carlo CRPS: crps_sample() on n_samples draws from dist."""
    if rng is None:
        rng = np.random.default_rng()
    return crps_sample(y, dist.sample(n_samples, params, rng))


def crps_normal(
    y: ArrayLike,
    mu: ArrayLike,
    sigma: ArrayLike,
) -> float | NDArray[np.float64]:
    """
    Closed-form CRPS of N(mu, sigma^2).

        sigma * [z * (2*Phi(z) - 1) + 2*phi(z) - 1/sqrt(pi)],  z = (y - mu) / sigma
    """
    y, mu, sigma = np.broadcast_arrays(
        *(np.atleast_1d(np.asarray(v, dtype=np.float64)) for v in (y, mu, sigma))
    )
    z = (y - mu) / sigma
    scores = sigma * (z * (2 * stats.norm.cdf(z) - 1) + 2 * stats.norm.pdf(z) - 1 / np.sqrt(np.pi))
    return _as_output(scores)

"""
Model comparison by expected log predictive density (ELPD).

The pointwise log predictive density of observation i is the log of the
posterior-mean likelihood, log(mean_d exp(log_lik[d, i])). Summing over
observations gives the ELPD; computed on held-out folds it estimates the
out-of-sample predictive accuracy.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Literal, Mapping

import numpy as np
import pandas as pd
from numpy.typing import NDArray
from scipy import special, stats

from .model import DistributionalRegression

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElpdResult:
    """
    Expected log predictive density with its standard error.

    Attributes:
        elpd: Sum of pointwise log predictive densities (higher is better)
        se: Standard error of elpd
        pointwise: Per-observation log predictive densities
    """

    elpd: float
    se: float
    pointwise: NDArray[np.float64] = field(repr=False, compare=False)

    @property
    def n_obs(self) -> int:
        return len(self.pointwise)


def pointwise_lpd(log_lik: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Log posterior-mean density per observation.

    Args:
        log_lik: Array of shape (n_draws, n_obs)

    Returns:
        Array of shape (n_obs,)
    """
    log_lik = np.atleast_2d(np.asarray(log_lik, dtype=np.float64))
    n_draws = log_lik.shape[0]
    return special.logsumexp(log_lik, axis=0) - np.log(n_draws)


def elpd(log_lik: NDArray[np.float64]) -> ElpdResult:
    """
    ELPD of a pointwise log-likelihood matrix.

    Args:
        log_lik: Array of shape (n_draws, n_obs)

    Returns:
        ElpdResult
    """
    pointwise = pointwise_lpd(log_lik)
    n = len(pointwise)
    se = float(np.sqrt(n * np.var(pointwise, ddof=1))) if n > 1 else 0.0
    return ElpdResult(elpd=float(np.sum(pointwise)), se=se, pointwise=pointwise)


def kfold_elpd(
    make_model: Callable[[], DistributionalRegression],
    frame: pd.DataFrame,
    k: int = 5,
    n_draws: int = 1000,
    rng: np.random.Generator | None = None,
    shuffle: bool = True,
) -> ElpdResult:
    """
    K-fold cross-validated ELPD.

    Process:
    1. Split rows into k folds
    2. For each fold, fit a fresh model on the other folds
    3. Evaluate the pointwise log predictive density of the held-out rows

    Args:
        make_model: Returns a new, unfitted model
        frame: Data containing response and covariates
        k: Number of folds
        n_draws: Approximate posterior draws per fold
        rng: Random number generator (fold assignment and draws)
        shuffle: Randomize fold assignment

    Returns:
        ElpdResult with pointwise values in the row order of frame

    Example:
        >>> result = kfold_elpd(
        ...     lambda: DistributionalRegression(sinhasinh_family(), formula),
        ...     data, k=10,
        ... )
    """
    n = len(frame)
    if not 2 <= k <= n:
        raise ValueError(f"k must be between 2 and the number of rows ({n}), got {k}")
    if rng is None:
        rng = np.random.default_rng()

    order = rng.permutation(n) if shuffle else np.arange(n)
    folds = np.array_split(order, k)
    pointwise = np.empty(n)

    for fold, test_idx in enumerate(folds):
        train_mask = np.ones(n, dtype=bool)
        train_mask[test_idx] = False

        model = make_model().fit(frame.iloc[train_mask])
        log_lik = model.log_lik(frame.iloc[test_idx], n_draws=n_draws, rng=rng)
        pointwise[test_idx] = pointwise_lpd(log_lik)
        logger.info(
            "Fold %d/%d: held-out elpd %.4f", fold + 1, k, float(np.sum(pointwise[test_idx]))
        )

    se = float(np.sqrt(n * np.var(pointwise, ddof=1)))
    return ElpdResult(elpd=float(np.sum(pointwise)), se=se, pointwise=pointwise)


def paired_t_test(scores_a: NDArray[np.float64], scores_b: NDArray[np.float64]) -> float:
    """
    Paired t-test for comparing two models' pointwise scores.

    H0: Mean scores are equal
    H1: Mean scores are different

    Args:
        scores_a: Scores for model A (e.g., pointwise elpd values)
        scores_b: Scores for model B

    Returns:
        p-value (small = significant difference)
    """
    if len(scores_a) != len(scores_b):
        raise ValueError("Score arrays must have same length")

    _, pvalue = stats.ttest_rel(scores_a, scores_b)
    return float(pvalue)


def determine_confidence(
    best_scores: NDArray[np.float64],
    second_scores: NDArray[np.float64],
    significance_level: float = 0.05,
) -> Literal["high", "medium", "low"]:
    """
    Determine confidence that the best model really is better.

    Confidence levels:
    - high: p < significance_level AND elpd difference > 4 standard errors
    - medium: p < significance_level
    - low: p >= significance_level (not statistically significant)

    Args:
        best_scores: Pointwise elpd of the best model
        second_scores: Pointwise elpd of the runner-up
        significance_level: p-value threshold for significance

    Returns:
        Confidence level as string
    """
    pvalue = paired_t_test(best_scores, second_scores)

    diff = np.asarray(best_scores) - np.asarray(second_scores)
    se_diff = np.sqrt(len(diff) * np.var(diff, ddof=1))
    ratio = np.sum(diff) / se_diff if se_diff > 0 else 0.0

    if pvalue < significance_level and ratio > 4.0:
        return "high"
    elif pvalue < significance_level:
        return "medium"
    else:
        return "low"


def compare_models(
    results: Mapping[str, ElpdResult],
    crps: Mapping[str, NDArray[np.float64]] | None = None,
) -> pd.DataFrame:
    """
    Rank models by ELPD.

    Args:
        results: Model name -> ElpdResult, all on the same observations
        crps: Optional model name -> pointwise CRPS (e.g. model.crps()),
            reported as a mean "crps" column

    Returns:
        DataFrame indexed by model name, best first, with columns
        elpd, se, elpd_diff (relative to best, <= 0), se_diff and p_value
        (paired t-test against the best; NaN for the best itself), plus
        crps when given
    """
    if not results:
        raise ValueError("results must contain at least one model")
    lengths = {name: res.n_obs for name, res in results.items()}
    if len(set(lengths.values())) != 1:
        raise ValueError(f"All models must be scored on the same observations, got {lengths}")
    if crps is not None and set(crps) != set(results):
        raise ValueError(
            f"crps must cover the same models as results, got {sorted(crps)} and {sorted(results)}"
        )

    ranked = sorted(results, key=lambda name: results[name].elpd, reverse=True)
    best = results[ranked[0]]

    rows = []
    for name in ranked:
        res = results[name]
        diff = res.pointwise - best.pointwise
        if name == ranked[0]:
            se_diff, pvalue = 0.0, np.nan
        else:
            se_diff = float(np.sqrt(len(diff) * np.var(diff, ddof=1)))
            pvalue = paired_t_test(res.pointwise, best.pointwise)
        rows.append({
            "model": name,
            "elpd": res.elpd,
            "se": res.se,
            "elpd_diff": float(np.sum(diff)),
            "se_diff": se_diff,
            "p_value": pvalue,
        })
        if crps is not None:
            rows[-1]["crps"] = float(np.mean(crps[name]))

    return pd.DataFrame(rows).set_index("model")

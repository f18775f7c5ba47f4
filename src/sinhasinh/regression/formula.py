"""Distributional formulas and design matrices."""

from dataclasses import dataclass, field
from typing import Mapping, Sequence

import numpy as np
import pandas as pd
from numpy.typing import NDArray

INTERCEPT = "Intercept"


@dataclass(frozen=True)
class DistributionalFormula:
    """
    Which covariates enter the linear predictor of each distributional parameter.

    Every parameter gets an intercept. Parameters absent from `terms` are
    intercept-only.

    Attributes:
        response: Column holding the response
        terms: Parameter name -> covariate column names

    Example:
        >>> # y ~ x, sigma ~ x, eps ~ 1, delta ~ 1
        >>> formula = DistributionalFormula(
        ...     response="y",
        ...     terms={"mu": ("x",), "sigma": ("x",)},
        ... )
    """

    response: str
    terms: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "terms", {name: tuple(cols) for name, cols in self.terms.items()}
        )

    def covariates(self, dpar: str) -> tuple[str, ...]:
        return self.terms.get(dpar, ())

    def term_names(self, dpar: str) -> tuple[str, ...]:
        """Coefficient names of `dpar`, intercept first."""
        return (INTERCEPT, *self.covariates(dpar))

    def describe(self, dpars: Sequence[str]) -> str:
        """brms-style text, e.g. 'y ~ x, sigma ~ x, eps ~ 1'."""
        parts = []
        for j, dpar in enumerate(dpars):
            lhs = self.response if j == 0 else dpar
            rhs = " + ".join(self.covariates(dpar)) or "1"
            parts.append(f"{lhs} ~ {rhs}")
        return ", ".join(parts)


def design_matrix(frame: pd.DataFrame, columns: Sequence[str]) -> NDArray[np.float64]:
    """
    Intercept column followed by the requested covariates.

    Args:
        frame: Data
        columns: Covariate column names

    Returns:
        Array of shape (len(frame), 1 + len(columns))

    Raises:
        KeyError: If a column is not in the frame
    """
    missing = [col for col in columns if col not in frame.columns]
    if missing:
        raise KeyError(f"Columns {missing} not found in DataFrame")

    intercept = np.ones((len(frame), 1))
    if not columns:
        return intercept
    covariates = frame.loc[:, list(columns)].to_numpy(dtype=np.float64)
    return np.hstack([intercept, covariates])

"""Distributional regression: families, draws, fitting and model comparison."""

from .comparison import (
    ElpdResult,
    compare_models,
    determine_confidence,
    elpd,
    kfold_elpd,
    paired_t_test,
    pointwise_lpd,
)
from .draws import (
    PosteriorDraws,
    log_lik_gaussian,
    log_lik_sinhasinh,
    predict_gaussian,
    predict_sinhasinh,
)
from .family import CustomFamily, family_from_name, gaussian_family, sinhasinh_family
from .formula import DistributionalFormula, design_matrix
from .links import IDENTITY, LOG, Link, get_link
from .model import DistributionalRegression, FitConfig
from .presets import nested_models
from .stan_code import SINHASINH_STAN_FUNCTIONS, stan_functions, stan_functions_block

__all__ = [
    "CustomFamily",
    "DistributionalFormula",
    "DistributionalRegression",
    "ElpdResult",
    "FitConfig",
    "IDENTITY",
    "LOG",
    "Link",
    "PosteriorDraws",
    "SINHASINH_STAN_FUNCTIONS",
    "compare_models",
    "design_matrix",
    "determine_confidence",
    "elpd",
    "family_from_name",
    "gaussian_family",
    "get_link",
    "kfold_elpd",
    "log_lik_gaussian",
    "log_lik_sinhasinh",
    "nested_models",
    "paired_t_test",
    "pointwise_lpd",
    "predict_gaussian",
    "predict_sinhasinh",
    "sinhasinh_family",
    "stan_functions",
    "stan_functions_block",
]

"""
sinhasinh: Sinh-arcsinh distributional regression

A Python library for the four-parameter sinh-arcsinh distribution of
Jones & Pewsey (2009) and for distributional regression with it: every
parameter of the response distribution (location, scale, skewness, tail
weight) can depend on covariates.

Key Features:
- Log density and sampler with explicit parameter-domain checks
- Closed-form CDF, quantile function, mean and variance
- Family descriptor (parameters, links, bounds, log-likelihood and
  posterior-predictive entry points, Stan functions) for regression backends
- Maximum-likelihood distributional regression with Laplace-approximate draws
- ELPD based model comparison, including K-fold cross-validation
- Posterior predictive plots

Basic Example:
    >>> import numpy as np
    >>> import sinhasinh as sas
    >>>
    >>> sas.log_density(0.0, mu=0.0, sigma=1.0, eps=0.0, delta=1.0)
    -0.9189385332046727
    >>>
    >>> rng = np.random.default_rng(0)
    >>> draws = sas.sample_n(rng, mu=0.0, sigma=1.0, eps=0.5, delta=0.8, n=1000)

Regression Example:
    >>> data = sas.simulate_data(sas.SimulationConfig(n_obs=500, seed=1))
    >>> models = sas.nested_models()
    >>> for model in models.values():
    ...     model.fit(data)
    >>> results = {name: sas.elpd(m.log_lik(n_draws=500)) for name, m in models.items()}
    >>> print(sas.compare_models(results))

References:
    Jones, M.C. & Pewsey, A. (2009). Sinh-arcsinh distributions. Biometrika.
    Gneiting, T. & Raftery, A.E. (2007). Strictly Proper Scoring Rules.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Errors
from .exceptions import DomainError, FamilyError, NotFittedError

# Core abstractions
from .core.distribution import ContinuousDistribution, Distribution, DistributionParameters
from .core.parameters import NormalParameters, SinhArcsinhParameters

# Distribution implementations (with short aliases)
from .distributions.normal import NormalDistribution
from .distributions.sinh_arcsinh import (
    SinhArcsinhDistribution,
    inverse_transform,
    log_density,
    sample,
    sample_n,
    transform,
)

Normal = NormalDistribution
SinhArcsinh = SinhArcsinhDistribution

# Regression
from .regression import (
    CustomFamily,
    DistributionalFormula,
    DistributionalRegression,
    ElpdResult,
    FitConfig,
    PosteriorDraws,
    SINHASINH_STAN_FUNCTIONS,
    compare_models,
    elpd,
    family_from_name,
    gaussian_family,
    kfold_elpd,
    log_lik_sinhasinh,
    nested_models,
    predict_sinhasinh,
    sinhasinh_family,
    stan_functions_block,
)

# Scoring rules
from .scoring import crps, crps_mc, crps_normal, crps_sample, log_score

# Simulation
from .simulate import SimulationConfig, simulate_data, true_parameters

# Visualization
from .visualization import (
    PosteriorPlotter,
    PlotStyle,
    DEFAULT_STYLE,
    PUBLICATION_STYLE,
    DARK_STYLE,
)

__all__ = [
    "__version__",
    # Errors
    "DomainError",
    "FamilyError",
    "NotFittedError",
    # Core abstractions
    "ContinuousDistribution",
    "Distribution",
    "DistributionParameters",
    "NormalParameters",
    "SinhArcsinhParameters",
    # Distributions
    "NormalDistribution",
    "SinhArcsinhDistribution",
    "Normal",
    "SinhArcsinh",
    "inverse_transform",
    "log_density",
    "sample",
    "sample_n",
    "transform",
    # Regression
    "CustomFamily",
    "DistributionalFormula",
    "DistributionalRegression",
    "ElpdResult",
    "FitConfig",
    "PosteriorDraws",
    "SINHASINH_STAN_FUNCTIONS",
    "compare_models",
    "elpd",
    "family_from_name",
    "gaussian_family",
    "kfold_elpd",
    "log_lik_sinhasinh",
    "nested_models",
    "predict_sinhasinh",
    "sinhasinh_family",
    "stan_functions_block",
    # Scoring rules
    "crps",
    "crps_mc",
    "crps_normal",
    "crps_sample",
    "log_score",
    # Simulation
    "SimulationConfig",
    "simulate_data",
    "true_parameters",
    # Visualization
    "PosteriorPlotter",
    "PlotStyle",
    "DEFAULT_STYLE",
    "PUBLICATION_STYLE",
    "DARK_STYLE",
]

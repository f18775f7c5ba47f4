"""The three nested models used to analyse the simulated data."""

from .family import gaussian_family, sinhasinh_family
from .formula import DistributionalFormula
from .model import DistributionalRegression, FitConfig


def nested_models(
    response: str = "y",
    covariate: str = "x",
    config: FitConfig | None = None,
) -> dict[str, DistributionalRegression]:
    """
    Three increasingly flexible regressions of `response` on `covariate`.

    - gaussian: y ~ x, sigma ~ x
    - sinhasinh_location_scale: y ~ x, sigma ~ x, eps ~ 1, delta ~ 1
    - sinhasinh_full: y ~ x, sigma ~ x, eps ~ x, delta ~ x

    Returns:
        Model name -> unfitted model, in order of complexity
    """
    location_scale = {"mu": (covariate,), "sigma": (covariate,)}
    full = {name: (covariate,) for name in ("mu", "sigma", "eps", "delta")}

    return {
        "gaussian": DistributionalRegression(
            gaussian_family(), DistributionalFormula(response, location_scale), config
        ),
        "sinhasinh_location_scale": DistributionalRegression(
            sinhasinh_family(), DistributionalFormula(response, location_scale), config
        ),
        "sinhasinh_full": DistributionalRegression(
            sinhasinh_family(), DistributionalFormula(response, full), config
        ),
    }

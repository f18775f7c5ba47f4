"""Stan source for the sinh-arcsinh family.

Regression backends that compile Stan programs need the density and the
random number generator as user-defined functions. The text below mirrors
log_density() and sample() in sinhasinh.distributions.sinh_arcsinh.

By default the _lpdf adds the -0.5*log(2*pi()) constant so it is a true log
density. With normalized=False the emitted function is exactly the unnormalized
kernel, matching log_density(..., normalized=False).
"""

_LPDF_TEMPLATE = """\
  real sinhasinh_lpdf(real y, real mu, real sigma, real eps, real delta) {{
    real y_z;
    real sigma_star;
    real S_y;
    real S_y_2;
    real C_y;
    real lp;

    lp = 0;
    sigma_star = sigma * delta;
    y_z = (y - mu) / sigma_star;

    S_y = sinh(eps + delta * asinh(y_z));
    S_y_2 = S_y * S_y;
    C_y = sqrt(1 + S_y_2);
    lp += -0.5 * S_y_2 - log(sigma_star);
    lp += log(delta) + log(C_y) - log(sqrt(1 + y_z * y_z));{constant}
    return lp;
  }}
"""

_RNG = """\
  real sinhasinh_rng(real mu, real sigma, real eps, real delta) {
    return mu + sigma * delta * sinh((asinh(normal_rng(0, 1)) - eps) / delta);
  }
"""

_NORMALIZING_CONSTANT = "\n    lp += -0.5 * log(2 * pi());"


def stan_functions(normalized: bool = True) -> str:
    """
    Stan definitions of sinhasinh_lpdf and sinhasinh_rng.

    Args:
        normalized: Include the -0.5*log(2*pi) constant so backend pointwise
            log-likelihoods agree with log_density(..., normalized=True)

    Returns:
        The two function definitions, without an enclosing block
    """
    constant = _NORMALIZING_CONSTANT if normalized else ""
    return _LPDF_TEMPLATE.format(constant=constant) + _RNG


def stan_functions_block(normalized: bool = True) -> str:
    """The definitions wrapped in a `functions { ... }` block."""
    return "functions {\n" + stan_functions(normalized) + "}\n"


SINHASINH_STAN_FUNCTIONS = stan_functions(normalized=True)

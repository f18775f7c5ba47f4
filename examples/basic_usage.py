"""
Basic usage example for sinhasinh.

This example demonstrates the core functionality:
1. Evaluating the sinh-arcsinh log density
2. Drawing samples and checking closed-form moments
3. Plotting how skewness and tail weight reshape the density
"""

import numpy as np

import sinhasinh as sas


def main() -> None:
    """Run basic usage examples."""

    # Example 1: The Normal special case
    print("Example 1: eps=0, delta=1 is the standard Normal")
    print("-" * 50)

    value = sas.log_density(0.0, mu=0.0, sigma=1.0, eps=0.0, delta=1.0)
    print(f"log_density(0 | 0, 1, 0, 1) = {value:.7f}")
    kernel = sas.log_density(0.0, mu=0.0, sigma=1.0, eps=1.0, delta=1.0, normalized=False)
    print(f"unnormalized kernel with eps=1  = {kernel:.4f}")
    print()

    # Example 2: Sampling
    print("Example 2: Samples against closed-form moments")
    print("-" * 50)

    dist = sas.SinhArcsinh()
    params = sas.SinhArcsinhParameters(
        mu=0.0,
        sigma=1.0,
        eps=0.5,    # Longer left tail
        delta=0.7,  # Heavier than Normal tails
    )
    rng = np.random.default_rng(42)
    draws = dist.sample(100_000, params, rng)

    print(f"{'':10s} {'closed form':>12s} {'sample':>10s}")
    print(f"{'mean':10s} {dist.mean(params):12.4f} {np.mean(draws):10.4f}")
    print(f"{'variance':10s} {dist.var(params):12.4f} {np.var(draws):10.4f}")
    print(f"{'median':10s} {dist.median(params):12.4f} {np.median(draws):10.4f}")
    print()

    # Example 3: Shapes
    print("Example 3: Density shapes")
    print("-" * 50)

    scenarios = [
        ("Normal", sas.SinhArcsinhParameters(mu=0.0, sigma=1.0)),
        ("Left skew", sas.SinhArcsinhParameters(mu=0.0, sigma=1.0, eps=0.8)),
        ("Right skew", sas.SinhArcsinhParameters(mu=0.0, sigma=1.0, eps=-0.8)),
        ("Heavy tails", sas.SinhArcsinhParameters(mu=0.0, sigma=1.0, delta=0.5)),
        ("Light tails", sas.SinhArcsinhParameters(mu=0.0, sigma=1.0, delta=2.0)),
    ]
    for name, p in scenarios:
        print(f"{name:12s}: mean={dist.mean(p):7.4f}  var={dist.var(p):7.4f}")

    plotter = sas.PosteriorPlotter()
    fig = plotter.density_curves(
        dist,
        [p for _, p in scenarios],
        np.linspace(-6, 6, 500),
        labels=[name for name, _ in scenarios],
    )
    plotter.save(fig, "sinhasinh_shapes.png")
    print("Saved sinhasinh_shapes.png")


if __name__ == "__main__":
    main()

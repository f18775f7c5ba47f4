"""Shared fixtures."""

import matplotlib

matplotlib.use("Agg")

import pytest

import sinhasinh as sas


@pytest.fixture(scope="session")
def simulated_data():
    """Skewed, heteroscedastic data with x-dependent tail weight."""
    return sas.simulate_data(sas.SimulationConfig(n_obs=1500, seed=20240601))


@pytest.fixture(scope="session")
def normal_data():
    """Data whose sinh-arcsinh parameters reduce to a Normal everywhere."""
    config = sas.SimulationConfig(
        n_obs=1000,
        mu=(1.0, 2.0),
        sigma=(-0.5, 0.3),
        eps=(0.0, 0.0),
        delta=(0.0, 0.0),
        seed=7,
    )
    return sas.simulate_data(config)

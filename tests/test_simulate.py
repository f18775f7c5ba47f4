"""Tests for simulated data."""

import numpy as np
import pytest

import sinhasinh as sas


class TestSimulationConfig:
    """Test config validation."""

    @pytest.mark.parametrize(
        "kwargs",
        [{"n_obs": 0}, {"x_range": (1.0, -1.0)}, {"eps": (0.0, 1.0, 2.0)}],
    )
    def test_invalid_config_raises(self, kwargs):
        with pytest.raises(ValueError):
            sas.SimulationConfig(**kwargs)


class TestSimulateData:
    """Test the generated data set."""

    def test_columns_and_length(self):
        data = sas.simulate_data(sas.SimulationConfig(n_obs=50, seed=0))
        assert list(data.columns) == ["x", "y", "mu", "sigma", "eps", "delta"]
        assert len(data) == 50

    def test_reproducible_with_seed(self):
        a = sas.simulate_data(sas.SimulationConfig(n_obs=30, seed=3))
        b = sas.simulate_data(sas.SimulationConfig(n_obs=30, seed=3))
        np.testing.assert_array_equal(a["y"], b["y"])

    def test_covariate_within_range(self):
        data = sas.simulate_data(sas.SimulationConfig(n_obs=200, x_range=(2.0, 3.0), seed=1))
        assert data["x"].between(2.0, 3.0).all()

    def test_true_parameters_follow_links(self):
        config = sas.SimulationConfig()
        params = sas.true_parameters(config, np.array([0.0, 1.0]))

        np.testing.assert_allclose(params["mu"], [0.0, 1.0])
        np.testing.assert_allclose(params["sigma"], [1.0, np.exp(0.5)])
        np.testing.assert_allclose(params["eps"], [0.0, 1.0])
        np.testing.assert_allclose(params["delta"], [1.0, np.exp(-0.5)])

    def test_normal_special_case_moments(self):
        config = sas.SimulationConfig(
            n_obs=20000, mu=(2.0, 0.0), sigma=(0.0, 0.0), eps=(0.0, 0.0), delta=(0.0, 0.0), seed=5
        )
        data = sas.simulate_data(config)
        assert data["y"].mean() == pytest.approx(2.0, abs=0.05)
        assert data["y"].std() == pytest.approx(1.0, abs=0.05)

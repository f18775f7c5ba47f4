"""Tests for proper scoring rules."""

import numpy as np
import pytest
from scipy import stats

import sinhasinh as sas


class TestLogScore:
    """Test Log Score (negative log-likelihood)."""

    @pytest.fixture
    def dist(self):
        return sas.SinhArcsinh()

    @pytest.fixture
    def params(self):
        return sas.SinhArcsinhParameters(mu=0.0, sigma=1.0, eps=0.5, delta=0.8)

    def test_negative_log_density(self, dist, params):
        score = sas.log_score(dist, params, 0.7)
        assert score == pytest.approx(-sas.log_density(0.7, *params.as_tuple()))

    def test_larger_for_unlikely_observations(self, dist, params):
        assert sas.log_score(dist, params, 6.0) > sas.log_score(dist, params, 0.0)

    def test_array_input(self, dist, params):
        scores = sas.log_score(dist, params, np.array([0.0, 0.5, 1.0]))
        assert len(scores) == 3


class TestCRPS:
    """Test CRPS by quadrature."""

    def test_matches_closed_form_for_normal(self):
        dist = sas.Normal()
        params = sas.NormalParameters(mu=0.5, sigma=2.0)
        for y in [-3.0, 0.5, 2.0]:
            assert sas.crps(dist, params, y) == pytest.approx(
                sas.crps_normal(y, 0.5, 2.0), rel=1e-4
            )

    def test_sinh_arcsinh_normal_case(self):
        dist = sas.SinhArcsinh()
        params = sas.SinhArcsinhParameters(mu=0.0, sigma=1.0)
        assert sas.crps(dist, params, 0.3) == pytest.approx(
            sas.crps_normal(0.3, 0.0, 1.0), rel=1e-4
        )

    def test_observation_outside_integration_range(self):
        dist = sas.Normal()
        params = sas.NormalParameters(mu=0.0, sigma=1.0)
        assert sas.crps(dist, params, 10.0) == pytest.approx(
            sas.crps_normal(10.0, 0.0, 1.0), rel=1e-3
        )

    def test_non_negative(self):
        dist = sas.SinhArcsinh()
        params = sas.SinhArcsinhParameters(mu=0.0, sigma=1.0, eps=1.0, delta=0.6)
        scores = sas.crps(dist, params, np.array([-4.0, 0.0, 2.0]))
        assert np.all(scores >= 0)

    def test_monte_carlo_agrees_with_integral(self):
        dist = sas.SinhArcsinh()
        params = sas.SinhArcsinhParameters(mu=0.2, sigma=0.8, eps=-0.4, delta=1.3)
        exact = sas.crps(dist, params, 0.5)
        approx = sas.crps_mc(dist, params, 0.5, n_samples=40000, rng=np.random.default_rng(0))
        assert approx == pytest.approx(exact, abs=0.02)


class TestCRPSSample:
    """Test the ensemble CRPS used for posterior predictive replicates."""

    def test_single_draw_is_absolute_error(self):
        assert sas.crps_sample(1.5, np.array([4.0])) == pytest.approx(2.5)

    def test_matches_pairwise_definition(self):
        rng = np.random.default_rng(6)
        draws = rng.normal(size=30)
        y = 0.4
        pairwise = np.mean(np.abs(draws - y)) - 0.5 * np.mean(
            np.abs(draws[:, None] - draws[None, :])
        )
        assert sas.crps_sample(y, draws) == pytest.approx(pairwise)

    def test_one_column_per_observation(self):
        rng = np.random.default_rng(7)
        y = np.array([-1.0, 0.0, 2.0])
        samples = rng.normal(loc=[-1.0, 0.0, 2.0], scale=1.0, size=(100000, 3))
        scores = sas.crps_sample(y, samples)

        assert scores.shape == (3,)
        np.testing.assert_allclose(scores, sas.crps_normal(0.0, 0.0, 1.0), atol=0.01)

    def test_shared_forecast_for_many_observations(self):
        draws = np.random.default_rng(8).normal(size=200000)
        y = np.array([0.0, 1.0, 3.0])
        np.testing.assert_allclose(
            sas.crps_sample(y, draws), sas.crps_normal(y, 0.0, 1.0), atol=0.01
        )

    def test_column_mismatch_raises(self):
        with pytest.raises(ValueError):
            sas.crps_sample(np.zeros(3), np.zeros((10, 2)))

    def test_empty_samples_raise(self):
        with pytest.raises(ValueError):
            sas.crps_sample(0.0, np.empty(0))


class TestCRPSNormal:
    """Test the closed-form Normal CRPS."""

    def test_at_mean(self):
        """CRPS(N(0,1), 0) = 2*phi(0) - 1/sqrt(pi)."""
        expected = 2 * stats.norm.pdf(0.0) - 1 / np.sqrt(np.pi)
        assert sas.crps_normal(0.0, 0.0, 1.0) == pytest.approx(expected)

    def test_scales_with_sigma(self):
        assert sas.crps_normal(0.0, 0.0, 3.0) == pytest.approx(3 * sas.crps_normal(0.0, 0.0, 1.0))

    def test_broadcasts_parameters(self):
        scores = sas.crps_normal(np.array([0.0, 1.0]), 0.0, np.array([1.0, 2.0]))
        assert scores.shape == (2,)

"""Tests for PosteriorDraws and the per-observation entry points."""

import numpy as np
import pytest

import sinhasinh as sas


@pytest.fixture
def draws():
    rng = np.random.default_rng(4)
    n_draws, n_obs = 50, 3
    return sas.PosteriorDraws(
        dpars={
            "mu": rng.normal(0.0, 0.1, (n_draws, n_obs)),
            "sigma": np.exp(rng.normal(0.0, 0.1, (n_draws, n_obs))),
            "eps": rng.normal(0.3, 0.1, (n_draws, n_obs)),
            "delta": np.exp(rng.normal(-0.2, 0.1, (n_draws, n_obs))),
        },
        y=np.array([-0.5, 0.2, 1.4]),
    )


class TestPosteriorDraws:
    """Test construction and validation."""

    def test_dimensions(self, draws):
        assert draws.n_draws == 50
        assert draws.n_obs == 3
        assert draws.column("mu", 1).shape == (50,)

    def test_mismatched_shapes_raise(self):
        with pytest.raises(ValueError):
            sas.PosteriorDraws(
                dpars={"mu": np.zeros((5, 2)), "sigma": np.ones((4, 2))},
                y=np.zeros(2),
            )

    def test_observation_count_must_match_y(self):
        with pytest.raises(ValueError):
            sas.PosteriorDraws(dpars={"mu": np.zeros((5, 2))}, y=np.zeros(3))

    def test_empty_dpars_raise(self):
        with pytest.raises(ValueError):
            sas.PosteriorDraws(dpars={}, y=np.zeros(1))

    def test_stored_draws_are_read_only(self, draws):
        with pytest.raises(TypeError):
            draws.dpars["mu"] = np.zeros((50, 3))
        with pytest.raises(ValueError):
            draws.dpars["mu"][0, 0] = 1.0
        with pytest.raises(ValueError):
            draws.y[0] = 1.0

    def test_inputs_are_copied(self):
        mu = np.zeros((4, 2))
        built = sas.PosteriorDraws(dpars={"mu": mu}, y=np.zeros(2))
        mu[0, 0] = 5.0

        assert mu.flags.writeable
        assert built.column("mu", 0)[0] == 0.0

    def test_from_parameter_rows(self):
        rows = [(0.0, 1.0, 0.0, 1.0), (1.0, 2.0, 0.5, 0.7)]
        built = sas.PosteriorDraws.from_parameter_rows(rows, y=0.25)

        assert built.n_draws == 2
        assert built.n_obs == 1
        np.testing.assert_allclose(built.column("delta", 0), [1.0, 0.7])


class TestLogLik:
    """Test the pointwise log-likelihood entry point."""

    def test_one_value_per_draw(self, draws):
        assert sas.log_lik_sinhasinh(2, draws).shape == (50,)

    def test_matches_log_density(self, draws):
        i = 1
        expected = [
            sas.log_density(
                draws.y[i],
                draws.dpars["mu"][d, i],
                draws.dpars["sigma"][d, i],
                draws.dpars["eps"][d, i],
                draws.dpars["delta"][d, i],
            )
            for d in range(draws.n_draws)
        ]
        np.testing.assert_allclose(sas.log_lik_sinhasinh(i, draws), expected)

    def test_single_draw_literal(self):
        built = sas.PosteriorDraws.from_parameter_rows([(0.0, 1.0, 0.0, 1.0)], y=0.0)
        assert sas.log_lik_sinhasinh(0, built)[0] == pytest.approx(-0.9189385, abs=1e-7)

    def test_invalid_draw_raises(self):
        built = sas.PosteriorDraws.from_parameter_rows(
            [(0.0, 1.0, 0.0, 1.0), (0.0, -1.0, 0.0, 1.0)], y=0.0
        )
        with pytest.raises(sas.DomainError):
            sas.log_lik_sinhasinh(0, built)


class TestPosteriorPredict:
    """Test the posterior-predictive entry point."""

    def test_one_value_per_draw(self, draws):
        y_rep = sas.predict_sinhasinh(0, draws, np.random.default_rng(1))
        assert y_rep.shape == (50,)
        assert np.all(np.isfinite(y_rep))

    def test_uses_draw_specific_parameters(self):
        built = sas.PosteriorDraws.from_parameter_rows(
            [(-50.0, 0.01, 0.0, 1.0), (50.0, 0.01, 0.0, 1.0)], y=0.0
        )
        y_rep = sas.predict_sinhasinh(0, built, np.random.default_rng(2))
        np.testing.assert_allclose(y_rep, [-50.0, 50.0], atol=0.1)

    def test_reproducible_with_seed(self, draws):
        a = sas.predict_sinhasinh(1, draws, np.random.default_rng(8))
        b = sas.predict_sinhasinh(1, draws, np.random.default_rng(8))
        np.testing.assert_array_equal(a, b)

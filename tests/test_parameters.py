"""Tests for parameter dataclasses."""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

import sinhasinh as sas


class TestSinhArcsinhParameters:
    """Test SinhArcsinhParameters validation and helpers."""

    def test_defaults_are_normal(self):
        params = sas.SinhArcsinhParameters(mu=1.0, sigma=2.0)
        assert params.eps == 0.0
        assert params.delta == 1.0

    def test_sigma_star(self):
        params = sas.SinhArcsinhParameters(mu=0.0, sigma=2.0, eps=0.0, delta=0.5)
        assert params.sigma_star == pytest.approx(1.0)

    def test_as_tuple_order(self):
        params = sas.SinhArcsinhParameters(mu=1.0, sigma=2.0, eps=3.0, delta=4.0)
        assert params.as_tuple() == (1.0, 2.0, 3.0, 4.0)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"sigma": 0.0},
            {"sigma": -1.0},
            {"delta": 0.0},
            {"delta": -0.1},
            {"mu": np.inf},
            {"eps": np.nan},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        values = {"mu": 0.0, "sigma": 1.0, "eps": 0.0, "delta": 1.0, **kwargs}
        with pytest.raises(sas.DomainError):
            sas.SinhArcsinhParameters(**values)

    def test_frozen(self):
        params = sas.SinhArcsinhParameters(mu=0.0, sigma=1.0)
        with pytest.raises(FrozenInstanceError):
            params.mu = 1.0

    def test_with_methods_return_new_instances(self):
        params = sas.SinhArcsinhParameters(mu=0.0, sigma=1.0, eps=0.2, delta=0.9)

        assert params.with_mu(5.0).mu == 5.0
        assert params.with_sigma(3.0).sigma == 3.0
        assert params.with_eps(-1.0).eps == -1.0
        assert params.with_delta(2.0).delta == 2.0
        assert params.mu == 0.0

    def test_with_method_validates(self):
        params = sas.SinhArcsinhParameters(mu=0.0, sigma=1.0)
        with pytest.raises(sas.DomainError):
            params.with_delta(0.0)


class TestNormalParameters:
    """Test NormalParameters validation."""

    def test_valid(self):
        params = sas.NormalParameters(mu=1.0, sigma=0.5)
        assert params.with_mu(2.0) == sas.NormalParameters(mu=2.0, sigma=0.5)
        assert params.with_sigma(1.5).sigma == 1.5

    def test_non_positive_sigma_raises(self):
        with pytest.raises(sas.DomainError):
            sas.NormalParameters(mu=0.0, sigma=0.0)

"""Tests for plotting utilities."""

import numpy as np
import pandas as pd
import pytest
from matplotlib.figure import Figure

import sinhasinh as sas


@pytest.fixture
def plotter():
    return sas.PosteriorPlotter()


@pytest.fixture
def replicated():
    rng = np.random.default_rng(0)
    x = rng.uniform(-1, 1, 80)
    y = x + rng.normal(0, 0.3, 80)
    y_rep = x + rng.normal(0, 0.3, (40, 80))
    return x, y, y_rep


class TestPlotStyle:
    """Test style configuration."""

    def test_presets(self):
        assert sas.DEFAULT_STYLE.name == "default"
        assert sas.PUBLICATION_STYLE.figure_dpi == 300
        assert sas.DARK_STYLE.palette == "Set2"

    def test_rcparams(self):
        params = sas.PUBLICATION_STYLE.to_rcparams()
        assert params["font.family"] == "serif"
        assert params["figure.dpi"] == 300

    def test_invalid_alpha_raises(self):
        with pytest.raises(ValueError):
            sas.PlotStyle(name="bad", band_alpha=1.5)


class TestPosteriorPlotter:
    """Test that each plot builds a figure."""

    def test_density_curves(self, plotter):
        params = [
            sas.SinhArcsinhParameters(mu=0.0, sigma=1.0),
            sas.SinhArcsinhParameters(mu=0.0, sigma=1.0, eps=0.8, delta=0.6),
        ]
        fig = plotter.density_curves(sas.SinhArcsinh(), params, np.linspace(-5, 5, 200))
        assert isinstance(fig, Figure)
        assert len(fig.axes[0].lines) == 2
        plotter.close(fig)

    def test_density_curves_label_mismatch(self, plotter):
        params = [sas.SinhArcsinhParameters(mu=0.0, sigma=1.0)]
        with pytest.raises(ValueError):
            plotter.density_curves(sas.SinhArcsinh(), params, np.linspace(-1, 1, 5), labels=["a", "b"])

    def test_posterior_predictive(self, plotter, replicated):
        _, y, y_rep = replicated
        fig = plotter.posterior_predictive(y, y_rep, n_replicates=10)
        assert len(fig.axes[0].lines) == 11
        plotter.close(fig)

    def test_posterior_predictive_shape_mismatch(self, plotter, replicated):
        _, y, y_rep = replicated
        with pytest.raises(ValueError):
            plotter.posterior_predictive(y[:10], y_rep)

    def test_predictive_bands(self, plotter, replicated):
        x, y, y_rep = replicated
        fig = plotter.predictive_bands(x, y, y_rep)
        assert isinstance(fig, Figure)
        plotter.close(fig)

    def test_predictive_bands_invalid_level(self, plotter, replicated):
        x, y, y_rep = replicated
        with pytest.raises(ValueError):
            plotter.predictive_bands(x, y, y_rep, levels=(0.5, 1.5))

    def test_parameter_curves(self, plotter):
        config = sas.SimulationConfig(n_obs=50, seed=2)
        data = sas.simulate_data(config)
        true = data[["mu", "sigma", "eps", "delta"]]
        fig = plotter.parameter_curves(data["x"], true * 1.1, true=true)
        assert len(fig.axes) == 4
        plotter.close(fig)

    def test_model_comparison(self, plotter):
        table = pd.DataFrame(
            {"elpd_diff": [0.0, -4.0, -20.0], "se_diff": [0.0, 2.0, 5.0]},
            index=pd.Index(["a", "b", "c"], name="model"),
        )
        fig = plotter.model_comparison(table)
        assert isinstance(fig, Figure)
        plotter.close(fig)

    def test_model_comparison_requires_columns(self, plotter):
        with pytest.raises(ValueError):
            plotter.model_comparison(pd.DataFrame({"elpd": [1.0]}))

    def test_save(self, plotter, replicated, tmp_path):
        _, y, y_rep = replicated
        fig = plotter.posterior_predictive(y, y_rep)
        path = tmp_path / "ppc.png"
        plotter.save(fig, str(path), dpi=50)
        assert path.exists()

"""Plots for fitted distributional regression models."""

from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib import colormaps
import numpy as np
import pandas as pd
from matplotlib.figure import Figure
from numpy.typing import NDArray
from scipy.stats import gaussian_kde

from ..core.distribution import ContinuousDistribution, DistributionParameters
from .styles import DEFAULT_STYLE, PlotStyle


class PosteriorPlotter:
    """
    Visualization interface for densities, posterior predictive checks
    and model comparisons.

    Example:
        >>> plotter = PosteriorPlotter(style=PUBLICATION_STYLE)
        >>> y_rep = model.posterior_predict(n_draws=100)
        >>> fig = plotter.posterior_predictive(data["y"], y_rep)
        >>> plotter.save(fig, "ppc.png")

    Attributes:
        style: PlotStyle configuration
    """

    def __init__(self, style: PlotStyle = DEFAULT_STYLE):
        self.style = style
        plt.rcParams.update(self.style.to_rcparams())

    def _colors(self, n: int) -> NDArray[np.float64]:
        return colormaps[self.style.palette](np.linspace(0, 1, max(n, 1)))

    def density_curves(
        self,
        dist: ContinuousDistribution,  # type: ignore[type-arg]
        params_list: Sequence[DistributionParameters],
        x: NDArray[np.float64],
        labels: Sequence[str] | None = None,
        title: str | None = None,
        figsize: tuple[int, int] = (10, 6),
    ) -> Figure:
        """
        Overlay the density of one family under several parameter sets.

        Args:
            dist: Distribution providing pdf()
            params_list: Parameter sets to draw
            x: Evaluation grid
            labels: Legend labels (defaults to the parameter reprs)
            title: Plot title (defaults to the distribution name)
            figsize: Figure size in inches

        Returns:
            matplotlib Figure object
        """
        fig, ax = plt.subplots(figsize=figsize)

        labels = labels or [repr(p) for p in params_list]
        if len(labels) != len(params_list):
            raise ValueError("labels must match params_list in length")

        for params, label, color in zip(params_list, labels, self._colors(len(params_list))):
            ax.plot(x, dist.pdf(x, params), label=label, color=color)

        ax.set_title(title or f"{dist.name} densities")
        ax.set_xlabel("y")
        ax.set_ylabel("Probability Density")
        ax.legend()
        ax.grid(True, alpha=self.style.grid_alpha)

        fig.tight_layout()
        return fig

    def posterior_predictive(
        self,
        y: NDArray[np.float64] | pd.Series,
        y_rep: NDArray[np.float64],
        n_replicates: int = 50,
        title: str = "Posterior predictive check",
        figsize: tuple[int, int] = (10, 6),
    ) -> Figure:
        """
        Density of the observed response against replicated data sets.

        Args:
            y: Observed response, shape (n_obs,)
            y_rep: Posterior predictive replicates, shape (n_draws, n_obs)
            n_replicates: Number of replicate densities to draw
            title: Plot title
            figsize: Figure size in inches

        Returns:
            matplotlib Figure object
        """
        y = np.asarray(y, dtype=np.float64)
        y_rep = np.atleast_2d(np.asarray(y_rep, dtype=np.float64))
        if y_rep.shape[1] != len(y):
            raise ValueError(
                f"y_rep has {y_rep.shape[1]} observations per draw but y has {len(y)}"
            )

        lo, hi = np.percentile(np.concatenate([y, y_rep.ravel()]), [0.5, 99.5])
        grid = np.linspace(lo, hi, 400)

        fig, ax = plt.subplots(figsize=figsize)
        for d, replicate in enumerate(y_rep[:n_replicates]):
            ax.plot(
                grid,
                gaussian_kde(replicate)(grid),
                color=self.style.replicate_color,
                alpha=self.style.replicate_alpha,
                linewidth=self.style.line_width * 0.7,
                label="y_rep" if d == 0 else None,
            )
        ax.plot(
            grid,
            gaussian_kde(y)(grid),
            color=self.style.observed_color,
            linewidth=self.style.line_width * 1.5,
            label="y",
        )

        ax.set_title(title)
        ax.set_xlabel("y")
        ax.set_ylabel("Density")
        ax.legend()
        ax.grid(True, alpha=self.style.grid_alpha)

        fig.tight_layout()
        return fig

    def predictive_bands(
        self,
        x: NDArray[np.float64] | pd.Series,
        y: NDArray[np.float64] | pd.Series,
        y_rep: NDArray[np.float64],
        levels: Sequence[float] = (0.5, 0.9),
        title: str = "Posterior predictive intervals",
        xlabel: str = "x",
        figsize: tuple[int, int] = (10, 6),
    ) -> Figure:
        """
        Observed data over the covariate with predictive interval bands.

        Args:
            x: Covariate, shape (n_obs,)
            y: Observed response, shape (n_obs,)
            y_rep: Posterior predictive replicates, shape (n_draws, n_obs)
            levels: Central interval probabilities
            title: Plot title
            xlabel: Covariate axis label
            figsize: Figure size in inches

        Returns:
            matplotlib Figure object
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        order = np.argsort(x)

        fig, ax = plt.subplots(figsize=figsize)
        for level in sorted(levels, reverse=True):
            if not 0 < level < 1:
                raise ValueError(f"levels must be in (0, 1), got {level}")
            lower_q = (1 - level) / 2
            lower, upper = np.quantile(y_rep, [lower_q, 1 - lower_q], axis=0)
            ax.fill_between(
                x[order],
                lower[order],
                upper[order],
                color=self.style.model_color,
                alpha=self.style.band_alpha,
                label=f"{int(level * 100)}% interval",
            )
        ax.plot(
            x[order],
            np.median(y_rep, axis=0)[order],
            color=self.style.model_color,
            label="median",
        )
        ax.scatter(x, y, s=8, color=self.style.observed_color, label="y")

        ax.set_title(title)
        ax.set_xlabel(xlabel)
        ax.set_ylabel("y")
        ax.legend()
        ax.grid(True, alpha=self.style.grid_alpha)

        fig.tight_layout()
        return fig

    def parameter_curves(
        self,
        x: NDArray[np.float64] | pd.Series,
        predicted: pd.DataFrame,
        true: pd.DataFrame | None = None,
        xlabel: str = "x",
        figsize: tuple[int, int] | None = None,
    ) -> Figure:
        """
        Estimated distributional parameters against a covariate.

        Args:
            x: Covariate, shape (n_obs,)
            predicted: One column per parameter (e.g. model.predict_parameters())
            true: Generating parameters with the same columns, drawn dashed
            xlabel: Covariate axis label
            figsize: Figure size in inches (defaults to 4 inches per panel)

        Returns:
            matplotlib Figure object
        """
        x = np.asarray(x, dtype=np.float64)
        order = np.argsort(x)
        columns = list(predicted.columns)
        figsize = figsize or (4 * len(columns), 4)

        fig, axes = plt.subplots(1, len(columns), figsize=figsize, squeeze=False)
        for ax, column in zip(axes[0], columns):
            ax.plot(
                x[order],
                predicted[column].to_numpy()[order],
                color=self.style.model_color,
                label="estimate",
            )
            if true is not None and column in true.columns:
                ax.plot(
                    x[order],
                    true[column].to_numpy()[order],
                    color=self.style.observed_color,
                    linestyle="--",
                    label="true",
                )
            ax.set_title(column)
            ax.set_xlabel(xlabel)
            ax.grid(True, alpha=self.style.grid_alpha)
        axes[0][0].legend()

        fig.tight_layout()
        return fig

    def model_comparison(
        self,
        table: pd.DataFrame,
        title: str = "ELPD difference to best model",
        figsize: tuple[int, int] = (8, 4),
    ) -> Figure:
        """
        Plot elpd_diff +/- 2 se_diff for each model.

        Args:
            table: Output of compare_models()
            title: Plot title
            figsize: Figure size in inches

        Returns:
            matplotlib Figure object
        """
        for column in ("elpd_diff", "se_diff"):
            if column not in table.columns:
                raise ValueError(f"Column '{column}' not found in comparison table")

        positions = np.arange(len(table))
        fig, ax = plt.subplots(figsize=figsize)
        ax.errorbar(
            table["elpd_diff"],
            positions,
            xerr=2 * table["se_diff"],
            fmt="o",
            color=self.style.model_color,
            capsize=4,
        )
        ax.axvline(0.0, color=self.style.observed_color, linestyle=":")
        ax.set_yticks(positions)
        ax.set_yticklabels(list(table.index))
        ax.invert_yaxis()
        ax.set_title(title)
        ax.set_xlabel("elpd_diff")
        ax.grid(True, axis="x", alpha=self.style.grid_alpha)

        fig.tight_layout()
        return fig

    @staticmethod
    def save(fig: Figure, path: str, dpi: int = 300, transparent: bool = False) -> None:
        """
        Save figure to file and close it.

        Args:
            fig: matplotlib Figure to save
            path: Output file path
            dpi: Resolution in dots per inch
            transparent: Whether to use transparent background
        """
        fig.savefig(path, dpi=dpi, bbox_inches="tight", transparent=transparent)
        plt.close(fig)

    @staticmethod
    def show(fig: Figure) -> None:
        plt.show()

    @staticmethod
    def close(fig: Figure) -> None:
        plt.close(fig)

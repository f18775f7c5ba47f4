"""Style configuration for visualizations."""

from dataclasses import dataclass
from typing import Any


@dataclass
class PlotStyle:
    """
    Configuration for plot styling.

    Attributes:
        name: Style name for identification
        font_family: Font family for text
        font_size: Base font size
        title_size: Title font size
        label_size: Axis label font size
        model_color: Color of fitted/theoretical curves
        observed_color: Color of observed data
        replicate_color: Color of posterior predictive replicates
        replicate_alpha: Transparency of each replicate density line
        band_alpha: Transparency of predictive interval bands
        palette: Colormap used to tell several models or parameter sets apart
        grid_alpha: Grid line transparency
        figure_dpi: Figure DPI for rendering
        line_width: Default line width
    """

    name: str
    font_family: str = "sans-serif"
    font_size: int = 12
    title_size: int = 14
    label_size: int = 12
    model_color: str = "#1f77b4"
    observed_color: str = "#222222"
    replicate_color: str = "#9ecae1"
    replicate_alpha: float = 0.3
    band_alpha: float = 0.25
    palette: str = "tab10"
    grid_alpha: float = 0.3
    figure_dpi: int = 100
    line_width: float = 1.5

    def __post_init__(self) -> None:
        for name in ("replicate_alpha", "band_alpha", "grid_alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")

    def to_rcparams(self) -> dict[str, Any]:
        """
        Convert to matplotlib rcParams dict.

        Returns:
            Dictionary suitable for plt.rcParams.update()
        """
        return {
            "font.family": self.font_family,
            "font.size": self.font_size,
            "axes.titlesize": self.title_size,
            "axes.labelsize": self.label_size,
            "figure.dpi": self.figure_dpi,
            "lines.linewidth": self.line_width,
            "grid.alpha": self.grid_alpha,
        }


DEFAULT_STYLE = PlotStyle(name="default")

PUBLICATION_STYLE = PlotStyle(
    name="publication",
    font_family="serif",
    font_size=11,
    title_size=12,
    label_size=11,
    model_color="#000000",
    replicate_color="#bbbbbb",
    figure_dpi=300,
    line_width=1.0,
    palette="Greys",
)

DARK_STYLE = PlotStyle(
    name="dark",
    model_color="#00d4ff",
    observed_color="#eeeeee",
    replicate_color="#ff6b6b",
    palette="Set2",
)

"""Visualization tools for sinhasinh."""

from .plotter import PosteriorPlotter
from .styles import PlotStyle, DEFAULT_STYLE, PUBLICATION_STYLE, DARK_STYLE

__all__ = [
    "PosteriorPlotter",
    "PlotStyle",
    "DEFAULT_STYLE",
    "PUBLICATION_STYLE",
    "DARK_STYLE",
]

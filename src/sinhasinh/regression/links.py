"""Link functions mapping linear predictors onto parameter domains."""

from dataclasses import dataclass
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..exceptions import FamilyError


@dataclass(frozen=True)
class Link:
    """
    A monotonic link between a distributional parameter and its linear predictor.

    Attributes:
        name: Link identifier ("identity" or "log")
        forward: Parameter -> linear predictor
        inverse: Linear predictor -> parameter
    """

    name: str
    forward: Callable[[ArrayLike], NDArray[np.float64]]
    inverse: Callable[[ArrayLike], NDArray[np.float64]]

    def __call__(self, value: ArrayLike) -> NDArray[np.float64]:
        return self.forward(value)


def _identity(value: ArrayLike) -> NDArray[np.float64]:
    return np.asarray(value, dtype=np.float64)


IDENTITY = Link(name="identity", forward=_identity, inverse=_identity)
LOG = Link(name="log", forward=np.log, inverse=np.exp)

_LINKS = {link.name: link for link in (IDENTITY, LOG)}


def get_link(name: str) -> Link:
    """
    Look up a link by name.

    Raises:
        FamilyError: If the link name is unknown
    """
    try:
        return _LINKS[name.lower()]
    except KeyError:
        raise FamilyError(
            f"Unknown link: '{name}'. Available: {sorted(_LINKS)}"
        ) from None

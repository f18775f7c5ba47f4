"""Exception types raised by sinhasinh."""


class DomainError(ValueError):
    """
    A distribution parameter lies outside its domain.

    Raised before any density or sampling computation when a positive
    parameter (sigma, delta) is zero or negative, or when a parameter is
    not finite.
    """


class FamilyError(ValueError):
    """A family descriptor is inconsistent or names an unknown link/family."""


class NotFittedError(RuntimeError):
    """A regression model was queried before fit() was called."""

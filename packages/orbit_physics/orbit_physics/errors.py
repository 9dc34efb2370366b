"""Exceptions raised by :mod:`orbit_physics`."""


class OrbitError(Exception):
    """Base exception for orbit computations."""


class InvalidInitialConditions(OrbitError, ValueError):
    """The (E, L, r0) combination admits no real initial du/dphi."""


class ConfigurationError(OrbitError, ValueError):
    """Integrator settings or run parameters are out of range."""


__all__ = ["OrbitError", "InvalidInitialConditions", "ConfigurationError"]

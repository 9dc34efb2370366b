"""Relativistic Binet equation for u = 1/r around a Schwarzschild mass.

    d^2u/dphi^2 + u = M/L^2 + 3 M u^2

All functions are pure; ``velocity_squared`` doubles as the admissibility
test for a starting radius.
"""
from typing import Optional, Tuple
import math

from .constants import M, RS
from .models import OrbitState


def acceleration(u: float, L: float) -> float:
    """Return d^2u/dphi^2 at inverse radius ``u``."""
    return M / (L * L) + 3.0 * M * u * u - u


def velocity_squared(u: float, E: float, L: float) -> Optional[float]:
    """Return (du/dphi)^2 from the energy relation, or None if it has no real root.

    With r = 1/u the value is

        [E^2 - (1 - rs/r)(1 + L^2 u^2)] / (L^2 r^4)

    and None is returned when the bracket is negative.
    """
    r = 1.0 / u
    term = E * E - (1.0 - RS / r) * (1.0 + L * L * u * u)
    if term < 0.0:
        return None
    return (term / (L * L)) * (1.0 / (r * r * r * r))


def binet_rhs(state: OrbitState, L: float) -> Tuple[float, float]:
    return state.v, acceleration(state.u, L)


def minimum_energy(L: float, r0: float) -> float:
    """Smallest E for which ``velocity_squared(1/r0, E, L)`` is non-negative."""
    e2 = (1.0 - RS / r0) * (1.0 + (L * L) / (r0 * r0))
    return math.sqrt(e2) if e2 > 0.0 else 0.0


def circular_orbit_radii(L: float) -> Optional[Tuple[float, float]]:
    """Radii (stable, unstable) where d^2u/dphi^2 vanishes, None below L^2 = 12 M^2."""
    disc = 1.0 - 12.0 * M * M / (L * L)
    # L^2 = 12 M^2 rounds to a tiny negative discriminant
    if disc < -1e-12:
        return None
    root = math.sqrt(max(disc, 0.0))
    scale = L * L / (2.0 * M)
    return scale * (1.0 + root), scale * (1.0 - root)

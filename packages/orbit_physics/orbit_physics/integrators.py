from typing import List, Optional
import logging
import math

from .constants import RS
from .errors import ConfigurationError, InvalidInitialConditions
from .field import binet_rhs, velocity_squared
from .models import (DEFAULT_SETTINGS, IntegratorSettings, OrbitState, Sample,
                     Termination, Trajectory)

logger = logging.getLogger(__name__)


def initial_state(E: float, L: float, r0: float) -> OrbitState:
    """Build the starting state at r0; the particle always starts moving inward (v > 0)."""
    if not (r0 > 0.0 and math.isfinite(r0)):
        raise InvalidInitialConditions(f"r0 must be positive and finite, got {r0}")
    if L * L == 0.0:
        raise InvalidInitialConditions(f"L={L} is too small to parametrize the orbit by phi")
    u = 1.0 / r0
    if not math.isfinite(u):
        raise InvalidInitialConditions(f"1/r0 is not representable for r0={r0}")
    du2 = velocity_squared(u, E, L)
    if du2 is None:
        raise InvalidInitialConditions(
            f"no real du/dphi at r0={r0} for E={E}, L={L}; increase E or L"
        )
    return OrbitState(u, math.sqrt(du2), 0.0)


def rk4_step(state: OrbitState, dphi: float, L: float):
    y0 = (state.u, state.v)
    half = state.phi + dphi / 2.0

    def add(a, b, f): return tuple(a[i] + f*b[i] for i in range(2))
    k1 = binet_rhs(state, L)
    k2 = binet_rhs(OrbitState(*add(y0, k1, dphi/2.0), half), L)
    k3 = binet_rhs(OrbitState(*add(y0, k2, dphi/2.0), half), L)
    k4 = binet_rhs(OrbitState(*add(y0, k3, dphi), state.phi + dphi), L)

    state.u   += (dphi / 6.0) * (k1[0] + 2*k2[0] + 2*k3[0] + k4[0])
    state.v   += (dphi / 6.0) * (k1[1] + 2*k2[1] + 2*k3[1] + k4[1])
    state.phi += dphi


def check_termination(state: OrbitState,
                      settings: IntegratorSettings = DEFAULT_SETTINGS) -> Optional[Termination]:
    """Return why the run must stop at ``state``, or None if it may continue."""
    if not (math.isfinite(state.u) and math.isfinite(state.v)) or state.u <= 0.0:
        return Termination.DIVERGED
    r = state.r
    if r < settings.capture_radius:
        return Termination.CAPTURED
    if r > settings.escape_radius:
        return Termination.ESCAPED
    return None


def _is_step_count(n) -> bool:
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        return False
    return math.isfinite(n) and int(n) == n and n >= 1


def integrate_orbit(E: float, L: float, r0: float, max_steps: int,
                    settings: IntegratorSettings = DEFAULT_SETTINGS) -> Trajectory:
    """Integrate the Binet equation from r0 and classify how the orbit ends.

    Each iteration checks the current state, records (r, phi), then applies
    one RK4 step of size ``settings.dphi``. A state that fails the check is
    never recorded. Invalid initial conditions give an empty trajectory
    tagged ``Termination.REJECTED`` instead of an exception.
    """
    if not _is_step_count(max_steps):
        raise ConfigurationError(f"max_steps must be a positive integer, got {max_steps!r}")
    try:
        state = initial_state(E, L, r0)
    except InvalidInitialConditions as exc:
        logger.warning("Invalid initial conditions: %s", exc)
        return Trajectory(E, L, Termination.REJECTED)

    samples: List[Sample] = []
    termination = Termination.TRUNCATED
    for _ in range(int(max_steps)):
        reason = check_termination(state, settings)
        if reason is not None:
            termination = reason
            break
        samples.append(Sample(state.r, state.phi))
        rk4_step(state, settings.dphi, L)

    logger.debug("Trajectory E=%g L=%g r0=%g: %d points, %s",
                 E, L, r0, len(samples), termination.value)
    return Trajectory(E, L, termination, tuple(samples))


def compute_trajectory(E: float, L: float, r0: float, max_steps: int,
                       settings: IntegratorSettings = DEFAULT_SETTINGS) -> List[Sample]:
    """Ordered (r, phi) samples for one orbit; empty when nothing is plottable."""
    return list(integrate_orbit(E, L, r0, max_steps, settings).samples)


def trajectory_payload(traj: Trajectory) -> dict:
    return {
        "E": traj.E,
        "L": traj.L,
        "termination": traj.termination.value,
        "samples": [{"r": s.r, "phi": s.phi} for s in traj.samples],
        "trail": [list(p) for p in traj.to_cartesian()],
        "hit_horizon": traj.termination is Termination.CAPTURED,
        "rs": RS,
    }

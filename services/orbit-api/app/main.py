import logging
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from orbit_physics.constants import isco_radius, photon_sphere_radius, schwarzschild_radius
from orbit_physics.field import circular_orbit_radii
from orbit_physics.integrators import integrate_orbit, trajectory_payload
from orbit_physics.models import Trajectory, settings_from_env

logger = logging.getLogger(__name__)

app = FastAPI(title="Orbit API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

EMPTY_TRAJECTORY_MESSAGE = "Cannot compute this trajectory. Try increasing E or L."

PRESETS = {
    "precessing_ellipse": {"E": 0.98, "L": 3.9, "r0": 8.0, "max_steps": 3000},
    "circular": {"E": 0.97, "L": 4.0, "r0": circular_orbit_radii(4.0)[0], "max_steps": 2000},
    "capture": {"E": 0.97, "L": 3.5, "r0": 4.5, "max_steps": 1500},
    "escape": {"E": 1.05, "L": 6.0, "r0": 10.0, "max_steps": 2000},
}


class TrajectoryCollection:
    """Trajectories kept across requests, oldest first."""

    def __init__(self):
        self._items: List[Trajectory] = []

    def add(self, traj: Trajectory):
        self._items.append(traj)

    def clear(self):
        self._items.clear()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    @property
    def total_points(self) -> int:
        return sum(len(t) for t in self._items)


app.state.trajectories = TrajectoryCollection()
app.state.settings = settings_from_env()


class BHReq(BaseModel):
    mass: float = Field(1.0, gt=0.0)


class OrbitReq(BaseModel):
    E: float = Field(..., ge=0.85, le=1.15)
    L: float = Field(..., ge=3.0, le=6.0)
    r0: float = Field(..., ge=3.0, le=15.0)
    max_steps: int = Field(3000, ge=1, le=20000)


def _integrate(req: OrbitReq) -> Trajectory:
    return integrate_orbit(req.E, req.L, req.r0, req.max_steps, app.state.settings)


@app.post("/derived")
def derived(req: BHReq):
    return {
        "mass": req.mass,
        "schwarzschild_radius": schwarzschild_radius(req.mass),
        "photon_sphere_radius": photon_sphere_radius(req.mass),
        "isco_radius": isco_radius(req.mass),
    }


@app.get("/presets")
def presets():
    return PRESETS


@app.post("/integrate")
def integrate(req: OrbitReq):
    return trajectory_payload(_integrate(req))


@app.get("/trajectories")
def list_trajectories():
    store = app.state.trajectories
    return {
        "trajectories": [trajectory_payload(t) for t in store],
        "total_points": store.total_points,
    }


@app.post("/trajectories")
def add_trajectory(req: OrbitReq):
    traj = _integrate(req)
    if traj.is_empty:
        raise HTTPException(status_code=422, detail=EMPTY_TRAJECTORY_MESSAGE)
    app.state.trajectories.add(traj)
    logger.info("Added trajectory E=%g L=%g (%d points, %s)",
                traj.E, traj.L, len(traj), traj.termination.value)
    return trajectory_payload(traj)


@app.delete("/trajectories")
def reset_trajectories():
    store = app.state.trajectories
    cleared = len(store)
    store.clear()
    logger.info("Cleared %d trajectories", cleared)
    return {"cleared": cleared}

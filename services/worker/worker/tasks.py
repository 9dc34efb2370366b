import os
from celery import Celery
from orbit_physics.integrators import integrate_orbit, trajectory_payload
from orbit_physics.models import settings_from_env

CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://redis:6379/0")
CELERY_BACKEND_URL = os.getenv("CELERY_BACKEND_URL", "redis://redis:6379/1")

celery = Celery("orbits", broker=CELERY_BROKER_URL, backend=CELERY_BACKEND_URL)

@celery.task
def integrate_task(E, L, r0, max_steps=3000):
    traj = integrate_orbit(E, L, r0, max_steps, settings_from_env())
    return trajectory_payload(traj)

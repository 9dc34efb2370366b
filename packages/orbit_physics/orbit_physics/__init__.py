from .constants import M, RS, schwarzschild_radius, photon_sphere_radius, isco_radius
from .errors import OrbitError, InvalidInitialConditions, ConfigurationError
from .models import (IntegratorSettings, DEFAULT_SETTINGS, Termination, OrbitState,
                     Sample, Trajectory, settings_from_env)
from .field import acceleration, velocity_squared, minimum_energy, circular_orbit_radii
from .integrators import compute_trajectory, integrate_orbit, trajectory_payload
__all__ = ["M","RS","schwarzschild_radius","photon_sphere_radius","isco_radius",
           "OrbitError","InvalidInitialConditions","ConfigurationError",
           "IntegratorSettings","DEFAULT_SETTINGS","Termination","OrbitState","Sample",
           "Trajectory","settings_from_env",
           "acceleration","velocity_squared","minimum_energy","circular_orbit_radii",
           "compute_trajectory","integrate_orbit","trajectory_payload"]

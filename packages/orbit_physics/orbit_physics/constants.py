# Geometric units, G = c = 1
M = 1.0

def schwarzschild_radius(mass: float = M) -> float:
    return 2.0 * mass

def photon_sphere_radius(mass: float = M) -> float:
    return 3.0 * mass

def isco_radius(mass: float = M) -> float:
    return 6.0 * mass

RS = schwarzschild_radius(M)

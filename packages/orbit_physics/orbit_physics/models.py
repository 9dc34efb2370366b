from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Tuple
import math
import os

from .constants import RS
from .errors import ConfigurationError


@dataclass(frozen=True)
class IntegratorSettings:
    """Policy constants for one integration run."""
    dphi: float = 0.01            # rad, fixed angular step
    horizon_margin: float = 1.05  # capture below horizon_margin * rs
    escape_radius: float = 50.0   # units of M

    def __post_init__(self):
        if not self.dphi > 0.0:
            raise ConfigurationError(f"dphi must be positive, got {self.dphi}")
        if not self.horizon_margin >= 1.0:
            raise ConfigurationError(f"horizon_margin must be >= 1, got {self.horizon_margin}")
        if not self.escape_radius > self.capture_radius:
            raise ConfigurationError(
                f"escape_radius must exceed the capture radius {self.capture_radius}, "
                f"got {self.escape_radius}"
            )

    @property
    def capture_radius(self) -> float:
        return self.horizon_margin * RS


DEFAULT_SETTINGS = IntegratorSettings()


class Termination(str, Enum):
    REJECTED = "rejected"
    CAPTURED = "captured"
    ESCAPED = "escaped"
    DIVERGED = "diverged"
    TRUNCATED = "truncated"


@dataclass
class OrbitState:
    u: float; v: float  # 1/r and du/dphi
    phi: float = 0.0

    @property
    def r(self) -> float:
        return 1.0 / self.u


@dataclass(frozen=True)
class Sample:
    r: float
    phi: float


@dataclass(frozen=True)
class Trajectory:
    E: float
    L: float
    termination: Termination
    samples: Tuple[Sample, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    @property
    def is_empty(self) -> bool:
        return not self.samples

    @property
    def radii(self) -> List[float]:
        return [s.r for s in self.samples]

    @property
    def angles(self) -> List[float]:
        return [s.phi for s in self.samples]

    def to_cartesian(self) -> List[Tuple[float, float]]:
        """Project samples onto the orbital plane as (x, y) points."""
        return [(s.r * math.cos(s.phi), s.r * math.sin(s.phi)) for s in self.samples]


def settings_from_env() -> IntegratorSettings:
    return IntegratorSettings(
        dphi=float(os.getenv("ORBIT_DPHI", DEFAULT_SETTINGS.dphi)),
        horizon_margin=float(os.getenv("ORBIT_HORIZON_MARGIN", DEFAULT_SETTINGS.horizon_margin)),
        escape_radius=float(os.getenv("ORBIT_ESCAPE_RADIUS", DEFAULT_SETTINGS.escape_radius)),
    )

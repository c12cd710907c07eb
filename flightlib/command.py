"""Control commands for a quadrotor."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from flightlib.types import SCALAR


def _nan_vector(size: int) -> np.ndarray:
    return np.full(size, np.nan, dtype=SCALAR)


@dataclass
class Command:
    """Either collective thrust with body rates, or single rotor thrusts.

    Unset quantities are NaN.
    """

    t: float = math.nan
    collective_thrust: float = math.nan
    omega: np.ndarray = field(default_factory=lambda: _nan_vector(3))
    thrusts: np.ndarray = field(default_factory=lambda: _nan_vector(4))

    def __post_init__(self) -> None:
        self.t = float(self.t)
        self.collective_thrust = float(self.collective_thrust)
        self.omega = np.array(self.omega, dtype=SCALAR)
        self.thrusts = np.array(self.thrusts, dtype=SCALAR)
        if self.omega.shape != (3,):
            raise ValueError(f"omega must have 3 entries, got {self.omega.shape}")
        if self.thrusts.shape != (4,):
            raise ValueError(f"thrusts must have 4 entries, got {self.thrusts.shape}")

    @classmethod
    def rates_thrust(cls, t, thrust, omega) -> Command:
        """Command with collective mass-normalized thrust and body rates."""
        return cls(t=t, collective_thrust=thrust, omega=omega)

    @classmethod
    def single_rotor(cls, t, thrusts) -> Command:
        """Command with individual rotor thrusts in newtons."""
        return cls(t=t, thrusts=thrusts)

    def _has_rates_thrust(self) -> bool:
        return math.isfinite(self.collective_thrust) and bool(
            np.isfinite(self.omega).all()
        )

    def _has_thrusts(self) -> bool:
        return bool(np.isfinite(self.thrusts).all())

    def valid(self) -> bool:
        """True if exactly one of the two command modes is set."""
        return math.isfinite(self.t) and (
            self._has_rates_thrust() != self._has_thrusts()
        )

    def is_single_rotor_thrusts(self) -> bool:
        return math.isfinite(self.t) and self._has_thrusts()

    def is_rates_thrust(self) -> bool:
        return math.isfinite(self.t) and self._has_rates_thrust()
"""State vector of a pendulum-like rigid body, laid out like the quadrotor state."""

from __future__ import annotations

import math
from enum import IntEnum

import numpy as np

from flightlib.types import SCALAR, Quaternion


class PendIndex(IntEnum):
    """Offsets and lengths of the blocks in the pendulum state vector."""

    POS = 0
    POSX = 0
    POSY = 1
    POSZ = 2
    NPOS = 3
    ATT = 3
    ATTW = 3
    ATTX = 4
    ATTY = 5
    ATTZ = 6
    NATT = 4
    VEL = 7
    VELX = 7
    VELY = 8
    VELZ = 9
    NVEL = 3
    OME = 10
    OMEX = 10
    OMEY = 11
    OMEZ = 12
    NOME = 3
    ACC = 13
    ACCX = 13
    ACCY = 14
    ACCZ = 15
    NACC = 3
    TAU = 16
    TAUX = 16
    TAUY = 17
    TAUZ = 18
    NTAU = 3
    BOME = 19
    BOMEX = 19
    BOMEY = 20
    BOMEZ = 21
    NBOME = 3
    BACC = 22
    BACCX = 22
    BACCY = 23
    BACCZ = 24
    NBACC = 3
    SIZE = 25
    DYN = 19


PS = PendIndex


class PendState:
    """State vector ``x`` of the pendulum at time ``t``."""

    __hash__ = None

    def __init__(self, x=None, t: float = math.nan) -> None:
        if x is None:
            arr = np.full(PS.SIZE, np.nan, dtype=SCALAR)
        else:
            arr = np.array(x, dtype=SCALAR)
        if arr.shape != (PS.SIZE,):
            raise ValueError(f"state must have {int(PS.SIZE)} entries, got {arr.shape}")
        self.x = arr
        self.t = float(t)

    @classmethod
    def size(cls) -> int:
        return int(PS.SIZE)

    @property
    def q(self) -> Quaternion:
        return Quaternion(*self.x[PS.ATT : PS.ATT + PS.NATT])

    @q.setter
    def q(self, quaternion: Quaternion) -> None:
        self.x[PS.ATT : PS.ATT + PS.NATT] = [
            quaternion.w, quaternion.x, quaternion.y, quaternion.z,
        ]

    def rotation_matrix(self) -> np.ndarray:
        return self.q.to_rotation_matrix()

    def set_zero(self) -> None:
        """Zero the state and time, with identity attitude."""
        self.t = 0.0
        self.x[:] = 0.0
        self.x[PS.ATTW] = 1.0

    def valid(self) -> bool:
        return bool(np.isfinite(self.x).all()) and math.isfinite(self.t)

    def copy(self) -> PendState:
        return PendState(self.x, self.t)

    def __eq__(self, other):
        if not isinstance(other, PendState):
            return NotImplemented
        if self.t != other.t:
            return False
        diff = np.linalg.norm(self.x - other.x)
        scale = min(np.linalg.norm(self.x), np.linalg.norm(other.x))
        return bool(diff <= 1e-5 * scale)

    def __str__(self) -> str:
        values = " ".join(f"{v:.3g}" for v in self.x)
        return f"State at {self.t:.3g}s: [{values}]"

    def __repr__(self) -> str:
        return f"PendState(x={self.x.tolist()!r}, t={self.t!r})"
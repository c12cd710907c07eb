"""Full quadrotor state vector with named views."""

from __future__ import annotations

import math
from enum import IntEnum

import numpy as np

from flightlib.types import SCALAR, Quaternion


class QuadIndex(IntEnum):
    """Offsets and lengths of the blocks in the quadrotor state vector."""

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
    NDYM = 19


QS = QuadIndex


def _format_scalar(value: float) -> str:
    return f"{value:.3g}"


class QuadState:
    """State vector ``x`` of the quadrotor at time ``t``.

    The block properties (``p``, ``v``, ...) are views into ``x``.
    """

    __hash__ = None

    def __init__(self, x=None, t: float = math.nan) -> None:
        if x is None:
            arr = np.full(QS.SIZE, np.nan, dtype=SCALAR)
        else:
            arr = np.array(x, dtype=SCALAR)
        if arr.shape != (QS.SIZE,):
            raise ValueError(f"state must have {int(QS.SIZE)} entries, got {arr.shape}")
        self.x = arr
        self.t = float(t)

    @classmethod
    def size(cls) -> int:
        return int(QS.SIZE)

    @property
    def q(self) -> Quaternion:
        return Quaternion(*self.x[QS.ATT : QS.ATT + QS.NATT])

    @q.setter
    def q(self, quaternion: Quaternion) -> None:
        self.x[QS.ATT : QS.ATT + QS.NATT] = [
            quaternion.w, quaternion.x, quaternion.y, quaternion.z,
        ]

    def rotation_matrix(self) -> np.ndarray:
        return self.q.to_rotation_matrix()

    def set_zero(self) -> None:
        """Zero the state and time, with identity attitude."""
        self.t = 0.0
        self.x[:] = 0.0
        self.x[QS.ATTW] = 1.0

    def valid(self) -> bool:
        return bool(np.isfinite(self.x).all()) and math.isfinite(self.t)

    def copy(self) -> QuadState:
        return QuadState(self.x, self.t)

    @property
    def p(self) -> np.ndarray:
        return self.x[QS.POS : QS.POS + QS.NPOS]

    @property
    def qx(self) -> np.ndarray:
        return self.x[QS.ATT : QS.ATT + QS.NATT]

    @property
    def v(self) -> np.ndarray:
        return self.x[QS.VEL : QS.VEL + QS.NVEL]

    @property
    def w(self) -> np.ndarray:
        return self.x[QS.OME : QS.OME + QS.NOME]

    @property
    def a(self) -> np.ndarray:
        return self.x[QS.ACC : QS.ACC + QS.NACC]

    @property
    def tau(self) -> np.ndarray:
        return self.x[QS.TAU : QS.TAU + QS.NTAU]

    @property
    def bw(self) -> np.ndarray:
        return self.x[QS.BOME : QS.BOME + QS.NBOME]

    @property
    def ba(self) -> np.ndarray:
        return self.x[QS.BACC : QS.BACC + QS.NBACC]

    def __eq__(self, other):
        if not isinstance(other, QuadState):
            return NotImplemented
        if self.t != other.t:
            return False
        diff = np.linalg.norm(self.x - other.x)
        scale = min(np.linalg.norm(self.x), np.linalg.norm(other.x))
        return bool(diff <= 1e-5 * scale)

    def __str__(self) -> str:
        values = " ".join(_format_scalar(v) for v in self.x)
        return f"State at {_format_scalar(self.t)}s: [{values}]"

    def __repr__(self) -> str:
        return f"QuadState(x={self.x.tolist()!r}, t={self.t!r})"
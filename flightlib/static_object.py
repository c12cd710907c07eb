"""Static scene objects such as racing gates."""

from __future__ import annotations

import numpy as np

from flightlib.types import SCALAR, Quaternion


def _vec3(value, name: str) -> np.ndarray:
    arr = np.array(value, dtype=SCALAR).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"{name} must have 3 entries, got {arr.shape[0]}")
    return arr


class StaticObject:
    """An object placed in the scene with a pose and scale."""

    def __init__(self, id: str, prefab_id: str) -> None:
        self._id = id
        self._prefab_id = prefab_id
        self._position = np.zeros(3, dtype=SCALAR)
        self._quaternion = Quaternion.identity()
        self._size = np.ones(3, dtype=SCALAR)

    @property
    def id(self) -> str:
        return self._id

    @property
    def prefab_id(self) -> str:
        return self._prefab_id

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        self._position = _vec3(value, "position")

    @property
    def quaternion(self) -> Quaternion:
        return self._quaternion

    @quaternion.setter
    def quaternion(self, value: Quaternion) -> None:
        if not isinstance(value, Quaternion):
            raise TypeError("quaternion must be a Quaternion")
        self._quaternion = value

    @property
    def size(self) -> np.ndarray:
        return self._size.copy()

    @size.setter
    def size(self, value) -> None:
        self._size = _vec3(value, "size")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, prefab_id={self._prefab_id!r})"


class StaticGate(StaticObject):
    """A racing gate."""

    def __init__(self, id: str, prefab_id: str = "rpg_gate") -> None:
        super().__init__(id, prefab_id)
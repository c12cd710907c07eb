"""Messages exchanged with the Unity renderer and their JSON forms."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Mapping, Union


class UnityScene(IntEnum):
    INDUSTRIAL = 0
    WAREHOUSE = 1
    GARAGE = 2
    NATUREFOREST = 3
    TUNELS = 4
    SCENE_NUM = 5


def _zeros16() -> list[float]:
    return [0.0] * 16


def _load(data: Union[str, bytes, Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(data, (str, bytes)):
        return json.loads(data)
    return data


@dataclass
class Camera:
    """Camera attached to a vehicle."""

    id: str = ""
    channels: int = 3
    width: int = 1024
    height: int = 768
    fov: float = 70.0
    near_clip_plane: list[float] = field(default_factory=lambda: [0.01, 0.01, 0.01, 0.01])
    far_clip_plane: list[float] = field(
        default_factory=lambda: [1000.0, 100.0, 1000.0, 1000.0]
    )
    depth_scale: float = 0.20
    is_depth: bool = False
    output_index: int = 0
    enabled_layers: list[bool] = field(default_factory=list)
    t_bc: list[float] = field(default_factory=_zeros16)

    def to_json(self) -> dict[str, Any]:
        return {
            "ID": self.id,
            "channels": self.channels,
            "width": self.width,
            "height": self.height,
            "fov": self.fov,
            "nearClipPlane": list(self.near_clip_plane),
            "farClipPlane": list(self.far_clip_plane),
            "T_BC": list(self.t_bc),
            "isDepth": self.is_depth,
            "enabledLayers": list(self.enabled_layers),
            "depthScale": self.depth_scale,
            "outputIndex": self.output_index,
        }


@dataclass
class Lidar:
    """Lidar attached to a vehicle."""

    id: str = ""
    num_beams: int = 10
    max_distance: float = 10.0
    start_scan_angle: float = -math.pi / 2
    end_scan_angle: float = math.pi / 2
    t_bs: list[float] = field(default_factory=_zeros16)

    def to_json(self) -> dict[str, Any]:
        return {
            "ID": self.id,
            "num_beams": self.num_beams,
            "max_distance": self.max_distance,
            "start_angle": self.start_scan_angle,
            "end_angle": self.end_scan_angle,
            "T_BS": list(self.t_bs),
        }


@dataclass
class Vehicle:
    """Vehicle in Unity coordinates (left-handed, y up)."""

    id: str = ""
    position: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    rotation: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0, 1.0])
    size: list[float] = field(default_factory=lambda: [1.0, 1.0, 1.0])
    cameras: list[Camera] = field(default_factory=list)
    lidars: list[Lidar] = field(default_factory=list)
    has_collision_check: bool = True

    def to_json(self) -> dict[str, Any]:
        return {
            "ID": self.id,
            "position": list(self.position),
            "rotation": list(self.rotation),
            "size": list(self.size),
            "cameras": [c.to_json() for c in self.cameras],
            "lidars": [lidar.to_json() for lidar in self.lidars],
            "hasCollisionCheck": self.has_collision_check,
        }


@dataclass
class UnityObject:
    """Static object in Unity coordinates."""

    id: str = ""
    prefab_id: str = ""
    position: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    rotation: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0, 1.0])
    size: list[float] = field(default_factory=lambda: [1.0, 1.0, 1.0])

    def to_json(self) -> dict[str, Any]:
        return {
            "ID": self.id,
            "prefabID": self.prefab_id,
            "position": list(self.position),
            "rotation": list(self.rotation),
            "size": list(self.size),
        }


@dataclass
class SettingsMessage:
    """Initial scene settings sent to Unity."""

    scene_id: int = UnityScene.WAREHOUSE
    vehicles: list[Vehicle] = field(default_factory=list)
    objects: list[UnityObject] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {
            "scene_id": int(self.scene_id),
            "vehicles": [v.to_json() for v in self.vehicles],
            "objects": [o.to_json() for o in self.objects],
        }


@dataclass
class PubMessage:
    """Pose update sent to Unity for one frame."""

    frame_id: int = 0
    vehicles: list[Vehicle] = field(default_factory=list)
    objects: list[UnityObject] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {
            "frame_id": int(self.frame_id),
            "vehicles": [v.to_json() for v in self.vehicles],
            "objects": [o.to_json() for o in self.objects],
        }


@dataclass
class SubVehicle:
    """Per-vehicle feedback received from Unity."""

    collision: bool = False
    lidar_ranges: list[float] = field(default_factory=list)

    @classmethod
    def from_json(cls, data) -> SubVehicle:
        obj = _load(data)
        collision = obj["collision"]
        if not isinstance(collision, bool):
            raise TypeError(f"collision must be a boolean, got {collision!r}")
        return cls(collision, [float(r) for r in obj["lidar_ranges"]])


@dataclass
class SubMessage:
    """Frame feedback received from Unity."""

    frame_id: int = 0
    sub_vehicles: list[SubVehicle] = field(default_factory=list)

    @classmethod
    def from_json(cls, data) -> SubMessage:
        obj = _load(data)
        frame_id = obj["frame_id"]
        if isinstance(frame_id, bool) or not isinstance(frame_id, int) or frame_id < 0:
            raise TypeError(f"frame_id must be a non-negative integer, got {frame_id!r}")
        return cls(frame_id, [SubVehicle.from_json(v) for v in obj["pub_vehicles"]])


@dataclass
class PointCloudMessage:
    """Request to generate a point cloud of a box region."""

    range: list[float] = field(default_factory=lambda: [20.0, 20.0, 20.0])
    origin: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    resolution: float = 0.15
    path: str = "point_clouds_data/"
    file_name: str = "default"

    def to_json(self) -> dict[str, Any]:
        return {
            "range": list(self.range),
            "origin": list(self.origin),
            "resolution": self.resolution,
            "path": self.path,
            "file_name": self.file_name,
        }
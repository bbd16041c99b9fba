"""Object transforms and 4x4 matrix helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Iterable

import numpy as np

Vec3 = tuple[float, float, float]


def _vec3(values: Iterable[float]) -> Vec3:
    items = tuple(float(v) for v in values)
    if len(items) != 3:
        raise ValueError(f"expected 3 components, got {len(items)}")
    return items  # type: ignore[return-value]


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def translation_matrix(offset: Iterable[float]) -> np.ndarray:
    """Homogeneous translation by ``offset``."""
    m = np.eye(4)
    m[:3, 3] = _vec3(offset)
    return m


def scaling_matrix(scale: Iterable[float]) -> np.ndarray:
    """Homogeneous non-uniform scaling."""
    return np.diag([*_vec3(scale), 1.0])


def euler_rotation(roll: float, pitch: float, yaw: float) -> np.ndarray:
    """Rotation about x by roll, then y by pitch, then z by yaw."""
    sr, cr = math.sin(roll), math.cos(roll)
    sp, cp = math.sin(pitch), math.cos(pitch)
    sy, cy = math.sin(yaw), math.cos(yaw)
    m = np.eye(4)
    m[:3, :3] = [
        [cy * cp, cy * sp * sr - sy * cr, cy * sp * cr + sy * sr],
        [sy * cp, sy * sp * sr + cy * cr, sy * sp * cr - cy * sr],
        [-sp, cp * sr, cp * cr],
    ]
    return m


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    f = 1.0 / math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (far + near) / (near - far)
    m[2, 3] = 2.0 * far * near / (near - far)
    m[3, 2] = -1.0
    return m


def look_at_rh(
    eye: Iterable[float], target: Iterable[float], up: Iterable[float]
) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``target``."""
    eye_v = np.array(_vec3(eye))
    z_axis = _normalize(eye_v - np.array(_vec3(target)))
    x_axis = _normalize(np.cross(np.array(_vec3(up)), z_axis))
    y_axis = np.cross(z_axis, x_axis)
    m = np.eye(4)
    m[0, :3] = x_axis
    m[1, :3] = y_axis
    m[2, :3] = z_axis
    m[:3, 3] = -m[:3, :3] @ eye_v
    return m


def matrix_bytes(matrix: np.ndarray) -> bytes:
    """Column-major native-endian 32-bit float bytes of a matrix."""
    return np.asarray(matrix, dtype=np.float32).tobytes(order="F")


def _fmt(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


@dataclass(frozen=True)
class Transform:
    """Position, scale and orientation of an object."""

    position: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)
    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _vec3(self.position))
        object.__setattr__(self, "scale", _vec3(self.scale))
        for name in ("pitch", "yaw", "roll"):
            object.__setattr__(self, name, float(getattr(self, name)))

    def matrix(self) -> np.ndarray:
        """Model matrix: translation, then rotation, then scaling."""
        rotation = euler_rotation(self.roll, self.pitch, self.yaw)
        return self.translation_matrix() @ rotation @ scaling_matrix(self.scale)

    def to_bytes(self) -> bytes:
        return matrix_bytes(self.matrix())

    def with_scale(self, scale: Iterable[float]) -> Transform:
        return replace(self, scale=_vec3(scale))

    def with_translation(self, translation: Iterable[float]) -> Transform:
        return replace(self, position=_vec3(translation))

    def with_yaw(self, yaw: float) -> Transform:
        return replace(self, yaw=yaw)

    def translate(self, delta: Iterable[float]) -> Transform:
        d = _vec3(delta)
        return replace(self, position=tuple(p + q for p, q in zip(self.position, d)))

    def translation_matrix(self) -> np.ndarray:
        return translation_matrix(self.position)

    def __str__(self) -> str:
        px, py, pz = (_fmt(v) for v in self.position)
        sx, sy, sz = (_fmt(v) for v in self.scale)
        return (
            "{\n"
            f"\tposition: <{px}, {py}, {pz}>\n"
            f"\tscale: <{sx}, {sy}, {sz}>\n"
            f"\tpitch: {_fmt(self.pitch)}\n"
            f"\tyaw: {_fmt(self.yaw)}\n"
            f"\troll: {_fmt(self.roll)}\n"
            "}"
        )
"""Cameras producing view and projection matrices, and mouse ray casting."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Iterable

import numpy as np

from .transform import (
    Transform,
    Vec3,
    _vec3,
    look_at_rh,
    matrix_bytes,
    perspective,
    translation_matrix,
)

_UP = (0.0, 1.0, 0.0)


def _fmt_vec(values: Iterable[float]) -> str:
    return "<" + ", ".join(repr(float(v)) for v in values) + ">"


@dataclass(frozen=True)
class Ray:
    """A ray with a unit ``direction`` starting at ``origin``."""

    direction: Vec3
    origin: Vec3

    def __str__(self) -> str:
        return (
            f"{{\n\tdirection: {_fmt_vec(self.direction)},\n"
            f"\t origin: {_fmt_vec(self.origin)}\n}}"
        )


@dataclass(frozen=True)
class CameraInfo:
    fovy: float
    near_clip: float
    far_clip: float
    aspect_ratio: float


class Camera(ABC):
    """A camera that can be moved, rotated and zoomed."""

    @abstractmethod
    def camera_info(self) -> CameraInfo: ...

    @abstractmethod
    def projection_matrix(self) -> np.ndarray: ...

    @abstractmethod
    def view_matrix(self) -> np.ndarray: ...

    def matrix(self, transform: Transform) -> np.ndarray:
        """Projection, view and model matrices combined."""
        return self.projection_matrix() @ self.view_matrix() @ transform.matrix()

    def to_bytes(self, transform: Transform) -> bytes:
        """Shader data for ``transform`` as seen by this camera."""
        return matrix_bytes(self.matrix(transform))

    @abstractmethod
    def move_x(self, delta: float) -> None:
        """Move along the x axis."""

    @abstractmethod
    def move_z(self, delta: float) -> None:
        """Move along the z axis."""

    @abstractmethod
    def rotate_x(self, delta: float) -> None:
        """Rotate horizontally."""

    @abstractmethod
    def rotate_y(self, delta: float) -> None:
        """Rotate vertically."""

    @abstractmethod
    def update_zoom(self, delta: float) -> None:
        """Change the zoom."""

    @abstractmethod
    def origin(self) -> Vec3: ...

    def cast_mouse_ray(self, mouse_pos: Iterable[float]) -> Ray:
        """Ray from the camera through a mouse position in [-1, 1] screen space."""
        mx, my = (float(v) for v in mouse_pos)
        info = self.camera_info()
        inverse = np.linalg.inv(self.view_matrix())
        y_box = math.tan(info.fovy / 2.0) * info.near_clip
        near = inverse @ [y_box * info.aspect_ratio * mx, y_box * my, -info.near_clip, 1.0]
        start = inverse @ [0.0, 0.0, 0.0, 1.0]
        offset = (near - start)[:3]
        direction = offset / np.linalg.norm(offset)
        return Ray(direction=_vec3(direction), origin=_vec3(start[:3]))


@dataclass
class FPSCamera(Camera):
    """First-person camera positioned at ``position``."""

    position: Vec3 = (0.0, 0.0, 0.0)
    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0
    fov: float = math.pi / 4.0
    aspect_ratio: float = 1.0
    near_clip: float = 0.1
    far_clip: float = 100.0

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)

    def with_translation(self, translation: Iterable[float]) -> FPSCamera:
        return replace(self, position=_vec3(translation))

    def translated(self, translation: Iterable[float]) -> FPSCamera:
        d = _vec3(translation)
        return replace(self, position=tuple(p + q for p, q in zip(self.position, d)))

    def camera_info(self) -> CameraInfo:
        return CameraInfo(self.fov, self.near_clip, self.far_clip, self.aspect_ratio)

    def origin(self) -> Vec3:
        return self.position

    def projection_matrix(self) -> np.ndarray:
        # The field of view and aspect ratio enter the projection in this order.
        return perspective(self.aspect_ratio, self.fov, self.near_clip, self.far_clip)

    def view_matrix(self) -> np.ndarray:
        target = (math.sin(self.yaw), math.sin(self.pitch), math.cos(self.yaw))
        rotation = look_at_rh((0.0, 0.0, 0.0), target, _UP)
        return rotation @ translation_matrix(tuple(-p for p in self.position))

    def move_x(self, delta: float) -> None:
        x, y, z = self.position
        self.position = (x + delta, y, z)

    def move_z(self, delta: float) -> None:
        x, y, z = self.position
        self.position = (x, y, z + delta)

    def rotate_x(self, delta: float) -> None:
        self.yaw += delta

    def rotate_y(self, delta: float) -> None:
        self.pitch += delta

    def update_zoom(self, delta: float) -> None:
        pass


@dataclass
class ThirdPersonCamera(Camera):
    """Camera orbiting ``center`` on a sphere of ``radius``."""

    center: Vec3 = (50.0, 0.0, 20.0)
    radius: float = 100.0
    theta: float = math.pi / 4.0
    phi: float = 0.0
    fov: float = math.pi / 4.0
    aspect_ratio: float = 1.0
    near_clip: float = 0.1
    far_clip: float = 500.0

    def __post_init__(self) -> None:
        self.center = _vec3(self.center)

    def camera_info(self) -> CameraInfo:
        return CameraInfo(self.fov, self.near_clip, self.far_clip, self.aspect_ratio)

    def origin(self) -> Vec3:
        return (
            self.radius * math.sin(self.theta) * math.sin(self.phi),
            self.radius * math.cos(self.theta),
            self.radius * math.sin(self.theta) * math.cos(self.phi),
        )

    def projection_matrix(self) -> np.ndarray:
        # The field of view and aspect ratio enter the projection in this order.
        return perspective(self.aspect_ratio, self.fov, self.near_clip, self.far_clip)

    def view_matrix(self) -> np.ndarray:
        rotation = look_at_rh(self.origin(), (0.0, 0.0, 0.0), _UP)
        return rotation @ translation_matrix(tuple(-c for c in self.center))

    def move_x(self, delta: float) -> None:
        x, y, z = self.center
        self.center = (x + delta, y, z)

    def move_z(self, delta: float) -> None:
        x, y, z = self.center
        self.center = (x, y, z + delta)

    def rotate_x(self, delta: float) -> None:
        self.phi += delta

    def rotate_y(self, delta: float) -> None:
        self.theta += delta

    def update_zoom(self, delta: float) -> None:
        self.radius += delta * self.radius
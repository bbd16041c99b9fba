"""Keyboard and mouse control of the game camera."""

from __future__ import annotations

from .camera import Camera
from .event import EventCollector

KEY_W = 17
KEY_A = 30
KEY_S = 31
KEY_D = 32

MOVE_SPEED = 100.0
ROTATE_SPEED = 40000.0
ZOOM_SPEED = 100.0


def apply_camera_controls(camera: Camera, events: EventCollector) -> None:
    """Move, rotate and zoom ``camera`` from this frame's input."""
    delta_s = events.delta_time
    camera.update_zoom(events.mouse_scroll_delta * delta_s * ZOOM_SPEED)
    step = MOVE_SPEED * delta_s
    keys = events.keycodes_down
    if KEY_A in keys:
        camera.move_x(-step)
    if KEY_D in keys:
        camera.move_x(step)
    if KEY_S in keys:
        camera.move_z(-step)
    if KEY_W in keys:
        camera.move_z(step)
    if events.left_mouse_down.down:
        dx, dy = events.mouse_delta_pos
        camera.rotate_x(dx * delta_s * ROTATE_SPEED)
        camera.rotate_y(dy * delta_s * ROTATE_SPEED)
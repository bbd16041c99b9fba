import pytest

from summit_surveyor.camera import FPSCamera, ThirdPersonCamera
from summit_surveyor.controls import (
    KEY_A,
    KEY_D,
    KEY_S,
    KEY_W,
    apply_camera_controls,
)
from summit_surveyor.event import ButtonEvent, EventCollector


def _move(keys, dt=0.5):
    camera = FPSCamera()
    apply_camera_controls(camera, EventCollector(keycodes_down=set(keys), delta_time=dt))
    return camera.position


def test_raw_scan_codes_drive_camera():
    x, y, z = _move([30, 17], dt=0.01)
    assert x == pytest.approx(-1.0)
    assert y == 0.0
    assert z == pytest.approx(1.0)
    assert _move([KEY_D, KEY_S], dt=0.01) == pytest.approx(_move([32, 31], dt=0.01))


def test_a_moves_left():
    x, y, z = _move([KEY_A], dt=0.01)
    assert x == pytest.approx(-1.0)
    assert (y, z) == (0.0, 0.0)


def test_a_and_d_are_opposite():
    ax, _, _ = _move([KEY_A])
    dx, _, _ = _move([KEY_D])
    assert ax < 0
    assert dx == pytest.approx(-ax)


def test_w_and_s_are_opposite():
    _, _, wz = _move([KEY_W])
    _, _, sz = _move([KEY_S])
    assert wz > 0
    assert sz == pytest.approx(-wz)


def test_opposite_keys_cancel():
    assert _move([KEY_A, KEY_D, KEY_W, KEY_S]) == pytest.approx((0.0, 0.0, 0.0))


def test_no_time_no_motion():
    assert _move([KEY_A, KEY_W], dt=0.0) == (0.0, 0.0, 0.0)


def test_rotation_needs_left_button():
    camera = FPSCamera()
    events = EventCollector(mouse_delta_pos=(0.1, 0.2), delta_time=0.01)
    apply_camera_controls(camera, events)
    assert (camera.yaw, camera.pitch) == (0.0, 0.0)


def test_rotation_with_left_button():
    camera = FPSCamera()
    events = EventCollector(
        mouse_delta_pos=(0.001, -0.002),
        delta_time=0.01,
        left_mouse_down=ButtonEvent(down=True),
    )
    apply_camera_controls(camera, events)
    assert camera.yaw > 0
    assert camera.pitch == pytest.approx(-2 * camera.yaw)


def test_scroll_zooms_third_person_camera():
    camera = ThirdPersonCamera()
    before = camera.radius
    apply_camera_controls(camera, EventCollector(mouse_scroll_delta=1.0, delta_time=0.001))
    assert camera.radius > before
    out = ThirdPersonCamera()
    apply_camera_controls(out, EventCollector(mouse_scroll_delta=-1.0, delta_time=0.001))
    assert out.radius < before


def test_no_scroll_keeps_radius():
    camera = ThirdPersonCamera()
    before = camera.radius
    apply_camera_controls(camera, EventCollector(delta_time=0.5))
    assert camera.radius == before
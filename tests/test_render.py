import pytest

from orbit_calc.render.camera import Camera
from orbit_calc.render.draw import downsample_points


def make_camera():
    return Camera((100, 50, 400, 300), 0.01, min_ppk=1e-4, max_ppk=1.0)


def test_world_screen_round_trip():
    camera = make_camera()
    assert camera.world_to_screen(0.0, 0.0) == (300, 200)
    assert camera.world_to_screen(1000.0, 1000.0) == (310, 190)
    assert camera.screen_to_world(310, 190) == pytest.approx((1000.0, 1000.0))


def test_fit_radius():
    camera = make_camera()
    camera.fit_radius(1000.0, 0.8, animate=False)
    assert camera.ppk == pytest.approx(0.12)

    camera.fit_radius(2000.0, 0.8)
    assert camera.ppk_target == pytest.approx(0.06)
    camera.update(0.5)
    assert camera.ppk == pytest.approx(0.09)


def test_zoom_is_clamped():
    camera = make_camera()
    camera.set_zoom(10.0)
    assert camera.ppk == 1.0
    camera.fit_radius(1e12, 0.8, animate=False)
    assert camera.ppk == 1e-4


def test_contains_and_pixels_to_world():
    camera = make_camera()
    assert camera.contains(100, 50)
    assert not camera.contains(500, 50)
    assert camera.pixels_to_world(20) == pytest.approx(2000.0)


def test_downsample_points_keeps_last():
    points = [(float(i), 0.0) for i in range(10)]
    sampled = downsample_points(points, 4)
    assert sampled[0] == points[0]
    assert sampled[-1] == points[-1]
    assert len(sampled) <= 5
    assert downsample_points(points, 20) == points

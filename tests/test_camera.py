import pytest

from blinddepths.camera import Camera2D

IDENTITY = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def test_centred_camera_has_identity_transform():
    camera = Camera2D(320.0, 180.0, 640.0, 360.0)
    assert camera.transform() == IDENTITY
    assert camera.world_to_screen(10.0, 20.0) == (10.0, 20.0)


def test_set_position_to_center():
    camera = Camera2D(0.0, 0.0, 640.0, 360.0)
    camera.set_position_to_center()
    assert camera.pos == (320.0, 180.0)
    assert camera.transform() == IDENTITY


@pytest.mark.parametrize("zoom", [0.5, 1.0, 2.0, 3.0])
@pytest.mark.parametrize("pos", [(0.0, 0.0), (100.0, 50.0), (-40.0, 900.0)])
def test_camera_position_maps_to_screen_centre(zoom, pos):
    camera = Camera2D(0.0, 0.0, 640.0, 360.0)
    camera.set_zoom(zoom)
    camera.set_position(*pos)
    sx, sy = camera.world_to_screen(*pos)
    assert sx == pytest.approx(320.0)
    assert sy == pytest.approx(180.0)


def test_zoom_scales_distances():
    camera = Camera2D(100.0, 100.0, 640.0, 360.0)
    camera.set_zoom(2.0)
    ax, ay = camera.world_to_screen(100.0, 100.0)
    bx, by = camera.world_to_screen(110.0, 105.0)
    assert bx - ax == pytest.approx(20.0)
    assert by - ay == pytest.approx(10.0)
    assert camera.scale == (2.0, 2.0)


def test_pos_add_updates_transform():
    camera = Camera2D(320.0, 180.0, 640.0, 360.0)
    before = camera.world_to_screen(0.0, 0.0)
    camera.pos_add_x(10.0)
    camera.pos_add_y(-5.0)
    after = camera.world_to_screen(0.0, 0.0)
    assert camera.pos == (330.0, 175.0)
    assert after[0] == pytest.approx(before[0] - 10.0)
    assert after[1] == pytest.approx(before[1] + 5.0)


def test_set_scale_independent_axes():
    camera = Camera2D(0.0, 0.0, 640.0, 360.0)
    camera.set_scale(2.0, 4.0)
    row_x, row_y, last = camera.transform()
    assert row_x[0] == 2.0
    assert row_y[1] == 4.0
    assert last == (0.0, 0.0, 1.0)
import math

import pytest

from blinddepths.camera import Camera2D
from blinddepths.echo import Echo, make_echoes
from blinddepths.world import (
    BLACK,
    CAVE_WIDTH,
    PURPLE,
    RED,
    TRANSPARENT,
    WHITE,
    Color,
    get_bg_color,
)

DT = 1.0 / 60.0


class _FixedRng:
    def __init__(self, value=40, fraction=0.25):
        self.value = value
        self.fraction = fraction

    def randint(self, a, b):
        assert 1 <= self.value <= 79
        assert (a, b) == (1, 79)
        return self.value

    def random(self):
        return self.fraction


def _filled(rgba, rows=4):
    return bytes(rgba) * (CAVE_WIDTH * rows)


@pytest.fixture
def camera():
    return Camera2D(0.0, 0.0, 640.0, 360.0)


def test_make_echoes_ring():
    echoes = make_echoes((100.0, 200.0), 0.5, PURPLE)
    assert len(echoes) == 61
    assert all(e.pos == (116.0, 216.0) for e in echoes)
    assert all(e.color == PURPLE and e.lifetime == 1.0 for e in echoes)
    assert echoes[0].direction == pytest.approx(-0.5)
    assert echoes[-1].direction == pytest.approx(2 * math.pi - 0.5)


def test_moves_through_open_water(camera):
    echo = Echo((10.0, 1.0), 0.0, PURPLE)
    echo.update(_filled([0, 0, 0, 255]), camera, DT, _FixedRng())
    assert echo.pos[0] == pytest.approx(16.0)
    assert echo.pos[1] == pytest.approx(1.0)
    assert not echo.hit
    assert echo.color == PURPLE


def test_hits_wall_and_takes_its_colour(camera):
    echo = Echo((10.0, 1.0), 0.0, PURPLE)
    echo.update(_filled([255, 255, 255, 255]), camera, DT, _FixedRng(value=40))
    assert echo.hit
    assert echo.color == WHITE
    assert echo.pos[0] == pytest.approx(10.0 + 6.0 + 40.0)


def test_red_marks_no_find(camera):
    echo = Echo((10.0, 1.0), 0.0, PURPLE)
    echo.update(_filled([255, 0, 0, 255]), camera, DT, _FixedRng())
    assert echo.no_find
    assert not echo.hit
    assert echo.color == TRANSPARENT


def test_stopped_echo_fades(camera):
    echo = Echo((10.0, 1.0), 0.0, WHITE, hit=True)
    echo.update(b"", camera, DT, _FixedRng())
    assert echo.pos == (10.0, 1.0)
    assert echo.lifetime < 1.0
    assert echo.color.a == echo.lifetime
    assert (echo.color.r, echo.color.g, echo.color.b) == (1.0, 1.0, 1.0)


def test_fade_monotonic_until_dead(camera):
    echo = Echo((0.0, 0.0), 0.0, Color(0.2, 0.4, 0.6), no_find=True)
    previous = echo.lifetime
    for _ in range(300):
        echo.update(b"", camera, DT, _FixedRng())
        assert echo.lifetime <= previous
        previous = echo.lifetime
    assert echo.lifetime <= 0.0
    frozen = echo.lifetime
    echo.update(b"", camera, DT, _FixedRng())
    assert echo.lifetime == frozen


def test_leaving_the_map_counts_as_hit(camera):
    echo = Echo((5000.0, 5000.0), 0.0, PURPLE)
    echo.update(b"", camera, DT, _FixedRng())
    assert echo.hit
    assert echo.color == TRANSPARENT


def test_filled_fixtures_read_back_as_their_colour():
    assert get_bg_color(_filled([0, 0, 0, 255], rows=1), 3.0, 0.0) == BLACK
    assert get_bg_color(_filled([255, 0, 0, 255], rows=2), 7.0, 1.0) == RED
import math

import pytest

from blinddepths.camera import Camera2D
from blinddepths.player import Controls, Player
from blinddepths.world import CAVE_WIDTH, PURPLE, Scene

DT = 1.0 / 60.0


@pytest.fixture(scope="module")
def black_cave():
    return bytes([0, 0, 0, 255]) * (CAVE_WIDTH * 400)


@pytest.fixture
def camera():
    return Camera2D(0.0, 0.0, 640.0, 360.0)


def test_idle_player_stays_still(black_cave, camera):
    player = Player()
    echoes = player.update(Controls(), black_cave, camera, Scene.GAME, DT)
    assert echoes == []
    assert player.pos == (201.0, 167.0)
    assert player.vel == (0.0, 0.0)


def test_forward_moves_along_heading(black_cave, camera):
    player = Player()
    for _ in range(5):
        player.update(Controls(forward=True), black_cave, camera, Scene.GAME, DT)
    assert player.pos[0] > 201.0
    assert player.pos[1] == pytest.approx(167.0)
    assert player.vel[0] > 0.0


def test_no_control_outside_game(black_cave, camera):
    player = Player()
    controls = Controls(forward=True, turn_right=True, echo=True)
    echoes = player.update(controls, black_cave, camera, Scene.START, DT)
    assert echoes == []
    assert player.pos == (201.0, 167.0)
    assert player.direction == 0.0


def test_turning_changes_direction(black_cave, camera):
    player = Player()
    player.update(Controls(turn_right=True), black_cave, camera, Scene.GAME, DT)
    assert player.direction == pytest.approx(1.0)
    player.update(Controls(turn_left=True), black_cave, camera, Scene.GAME, DT)
    player.update(Controls(turn_left=True), black_cave, camera, Scene.GAME, DT)
    assert player.direction == pytest.approx(-1.0)


def test_speed_is_clamped(black_cave, camera):
    player = Player()
    player.update(Controls(forward=True), black_cave, camera, Scene.GAME, 10.0)
    moved = math.dist(player.pos, (201.0, 167.0))
    assert moved <= 3.0 + 1e-9
    assert moved > 2.9


def test_echo_then_cooldown(black_cave, camera):
    player = Player()
    first = player.update(Controls(echo=True), black_cave, camera, Scene.GAME, DT)
    second = player.update(Controls(echo=True), black_cave, camera, Scene.GAME, DT)
    assert len(first) == 61
    assert all(echo.color == PURPLE for echo in first)
    assert first[0].pos == (217.0, 183.0)
    assert second == []


def test_bounces_off_non_black(camera):
    player = Player(pos=(5000.0, 5000.0), vel=(1.0, 0.0))
    player.update(Controls(), b"", camera, Scene.GAME, DT)
    assert player.vel[0] < 0.0
    assert player.vel[1] == 0.0


def test_sonar_ring_is_circle_around_sprite_centre():
    player = Player(pos=(10.0, 20.0), direction=0.5)
    points = player.sonar_ring()
    assert len(points) == 31
    for point in points:
        assert math.dist(point, (26.0, 36.0)) == pytest.approx(40.0)
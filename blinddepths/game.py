"""Game state, sound playback, rendering and the main loop."""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, Sequence

import pygame

from blinddepths.beacon import Beacon
from blinddepths.camera import Camera2D
from blinddepths.echo import Echo, RandomSource
from blinddepths.friend import Friend
from blinddepths.monster import Monster
from blinddepths.player import Controls, Player
from blinddepths.world import (
    PURPLE,
    RENDER_HEIGHT,
    RENDER_WIDTH,
    WHITE,
    Color,
    Scene,
    map_range,
)

WINDOW_SIZE = (1440, 810)
TITLE = "Blind depths"

AMBIANCE = 0
JUMPSCARE = 1
RANDOM_SOUND_FIRST = 2
RANDOM_SOUND_LAST = 7
SOUND_FILES = (
    "ambiance.mp3",
    "jumpscare.mp3",
    "creepy_cave.mp3",
    "monster.mp3",
    "echo_scary.wav",
    "more_scary.wav",
    "scary_sound.mp3",
    "short_scary.wav",
)

MUSIC_DELAY_FRAMES = 30
RANDOM_SOUND_PERIOD = 30
MESSAGE_FRAMES = 250.0
HINT_POS = (900.0, 1600.0)
HINT_DISTANCE = 100.0
FRIEND_SIGHT_DISTANCE = 16.0
DEATH_DISTANCE = 400.0
END_TEXT_X = -600.0
BEACON_COUNT = 3
PLACED_BEACON_FREQ = 60
SPRITE_OFFSET = 16.0

FOUND_TEXT = "Thank god you found me.. Please lead me back.."
HINT_TEXT = "There's some white debris left.. It must be this way"
STORY_TEXT = (
    "STORY:\nYou're a submarine pilot in one of the deepest parts of the ocean and your "
    "only form of navigation is echoes you send that reveal the details of the cave "
    "walls. Your colleague got lost in one of the most complex deep ocean cave systems. "
    "Countless have already gone missing in that cave.\nRumors say that some kind of "
    "creature lives there..\n\nFind him and bring him back.\n\n\n\n\nControls:\n"
    "Use A and D keys to turn\nUse the W key to accelerate\nUse Space to send an echo\n"
    "Use the B key to place beacons (You only have 3)\n"
    "*Beacons are useful for navigation and marking areas"
)


def _distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def _default_camera() -> Camera2D:
    camera = Camera2D(0.0, 0.0, RENDER_WIDTH * 2.0, RENDER_HEIGHT * 2.0)
    camera.set_zoom(1.0)
    return camera


def _default_beacons() -> list[Beacon]:
    return [
        Beacon((885.0, 165.0), False, 15),
        Beacon((880.0, 625.0), False, 15),
        Beacon((227.0, 143.0), False, 15),
        Beacon((1803.0, 143.0), False, 15),
    ]


@dataclass
class DeathScene:
    """Fade-to-black state of the ending."""

    fade: float = 0.0
    show_text: bool = False


@dataclass
class GameState:
    """Everything that changes while the game runs, independent of drawing."""

    pixels: bytes | bytearray | memoryview
    camera: Camera2D = field(default_factory=_default_camera)
    player: Player = field(default_factory=Player)
    echoes: list[Echo] = field(default_factory=list)
    beacons: list[Beacon] = field(default_factory=_default_beacons)
    friend: Friend = field(default_factory=lambda: Friend((1825.0, 1080.0)))
    monster: Monster = field(default_factory=lambda: Monster((1268.0, 460.0)))
    num_of_beacons: int = BEACON_COUNT
    scene: Scene = Scene.START
    death_scene: DeathScene = field(default_factory=DeathScene)
    music_start: bool = False
    music_delay: int = 0
    played_random_time: int = 0
    show_found_text: bool = False
    found_text_timer: float = MESSAGE_FRAMES
    show_hint: bool = False
    show_hint_timer: float = MESSAGE_FRAMES
    beacon_requested: bool = False

    def start(self) -> None:
        """Leave the title screen and queue the ambient music."""
        self.music_start = True
        self.scene = Scene.GAME

    def update(
        self, controls: Controls, dt: float, elapsed: float, rng: RandomSource
    ) -> list[int]:
        """Advance one frame and return the indices of sounds to play."""
        sounds: list[int] = []

        if self.music_start:
            self.music_delay += 1
        if self.music_delay >= MUSIC_DELAY_FRAMES:
            sounds.append(AMBIANCE)
            self.music_delay = 0
            self.music_start = False

        second = int(elapsed)
        if (
            second % RANDOM_SOUND_PERIOD == 0
            and self.scene is Scene.GAME
            and self.played_random_time != second
        ):
            if rng.random() < 0.5:
                sounds.append(rng.randint(RANDOM_SOUND_FIRST, RANDOM_SOUND_LAST))
            self.played_random_time = second

        if _distance(self.player.pos, HINT_POS) < HINT_DISTANCE:
            self.show_hint = True

        self.echoes.extend(
            self.player.update(controls, self.pixels, self.camera, self.scene, dt)
        )

        if self.monster.activated:
            if self.scene is not Scene.END:
                sounds.append(JUMPSCARE)
            self.scene = Scene.END

        px, py = self.player.pos
        self.camera.set_position(px + SPRITE_OFFSET, py + SPRITE_OFFSET)

        for echo in self.echoes:
            echo.update(self.pixels, self.camera, dt, rng)
            if not echo.hit and _distance(echo.pos, self.friend.pos) < FRIEND_SIGHT_DISTANCE:
                self.friend.show = True

        if self.friend.found:
            self.show_found_text = True

        self.echoes = [echo for echo in self.echoes if echo.lifetime > 0.0]

        self.monster.update(self.player.pos, self.friend.found, dt)
        self.friend.update(self.player.pos, dt)

        if self.beacon_requested and self.num_of_beacons > 0:
            self.beacons.append(Beacon(self.player.pos, True, PLACED_BEACON_FREQ))
            self.num_of_beacons -= 1
        self.beacon_requested = False

        for beacon in self.beacons:
            self.echoes.extend(beacon.update(dt, rng))

        if self.scene is Scene.END:
            mx, _ = self.monster.pos
            if _distance(self.player.pos, self.monster.pos) < DEATH_DISTANCE:
                self.death_scene.fade = map_range(mx - px, 0.0, DEATH_DISTANCE, 1.0, 0.0)
            if mx < px:
                self.death_scene.fade = 1.0
            if mx < END_TEXT_X:
                self.death_scene.show_text = True

        return sounds

    def visible_echoes(self) -> list[Echo]:
        """Return the echoes close enough to the camera to be drawn."""
        cx, cy = self.camera.pos
        return [
            echo
            for echo in self.echoes
            if cx - RENDER_WIDTH < echo.pos[0] < cx + RENDER_WIDTH
            and cy - RENDER_HEIGHT < echo.pos[1] < cy + RENDER_HEIGHT
        ]


class _Playable(Protocol):
    def set_volume(self, value: float) -> None: ...

    def play(self, loops: int = 0) -> Any: ...


class SoundSystem:
    """A fixed bank of sounds, each with its own volume and repeat setting."""

    def __init__(
        self,
        sources: Sequence[_Playable],
        repeat: Sequence[bool] | None = None,
        volume: Sequence[float] | None = None,
    ) -> None:
        count = len(sources)
        self.sources = list(sources)
        self.repeat = list(repeat) if repeat is not None else [i == 0 for i in range(count)]
        self.volume = list(volume) if volume is not None else [1.0] * count
        if len(self.repeat) != count or len(self.volume) != count:
            raise ValueError("repeat and volume must have one entry per sound")
        self._channels: list[Any] = [None] * count

    def play(self, index: int) -> None:
        """Start the sound at index, looping it forever if it repeats."""
        source = self.sources[index]
        source.set_volume(self.volume[index])
        self._channels[index] = source.play(loops=-1 if self.repeat[index] else 0)

    def is_playing(self, index: int) -> bool:
        """Tell whether the sound at index was started and is still playing."""
        channel = self._channels[index]
        return channel is not None and bool(channel.get_busy())


def load_cave_pixels(path: str | Path) -> bytes:
    """Load an image and return its pixels as tightly packed RGBA bytes."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"cave image not found: {path}")
    surface = pygame.image.load(str(path))
    return pygame.image.tobytes(surface, "RGBA")


def _load_sounds(directory: Path) -> list[pygame.mixer.Sound]:
    return [pygame.mixer.Sound(str(directory / name)) for name in SOUND_FILES]


def _rgba(color: Color) -> tuple[int, int, int, int]:
    return tuple(  # type: ignore[return-value]
        round(max(0.0, min(1.0, channel)) * 255)
        for channel in (color.r, color.g, color.b, color.a)
    )


def _wrap(font: pygame.font.Font, text: str, width: float) -> list[str]:
    lines: list[str] = []
    for paragraph in text.split("\n"):
        line = ""
        for word in paragraph.split(" "):
            candidate = f"{line} {word}" if line else word
            if line and font.size(candidate)[0] > width:
                lines.append(line)
                line = word
            else:
                line = candidate
        lines.append(line)
    return lines


@dataclass
class _Assets:
    player_image: pygame.Surface
    monster_image: pygame.Surface
    font_path: Path
    fonts: dict[int, pygame.font.Font] = field(default_factory=dict)

    def font(self, size: int) -> pygame.font.Font:
        if size not in self.fonts:
            self.fonts[size] = pygame.font.Font(str(self.font_path), size)
        return self.fonts[size]


class Game:
    """The window, input handling and drawing around a GameState."""

    def __init__(self, assets_dir: str | Path) -> None:
        self.assets_dir = Path(assets_dir)

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(TITLE)
            assets = _Assets(
                player_image=pygame.image.load(str(self.assets_dir / "player.png")).convert_alpha(),
                monster_image=pygame.image.load(str(self.assets_dir / "monster.png")).convert_alpha(),
                font_path=self.assets_dir / "slkscr.ttf",
            )
            state = GameState(load_cave_pixels(self.assets_dir / "cave.png"))
            sounds = SoundSystem(_load_sounds(self.assets_dir))
            clock = pygame.time.Clock()
            rng = random.Random()

            running = True
            while running:
                dt = clock.tick(60) / 1000.0
                echo_pressed = False
                clicked = False
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_SPACE:
                            echo_pressed = True
                        elif event.key == pygame.K_b:
                            state.beacon_requested = True
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        clicked = True

                keys = pygame.key.get_pressed()
                controls = Controls(
                    forward=bool(keys[pygame.K_w]),
                    turn_left=bool(keys[pygame.K_a]),
                    turn_right=bool(keys[pygame.K_d]),
                    echo=echo_pressed,
                )
                elapsed = pygame.time.get_ticks() / 1000.0
                for index in state.update(controls, dt, elapsed, rng):
                    sounds.play(index)

                self._draw(screen, assets, state, dt, clicked)
                pygame.display.flip()
        finally:
            pygame.quit()

    def _draw(
        self,
        screen: pygame.Surface,
        assets: _Assets,
        state: GameState,
        dt: float,
        clicked: bool,
    ) -> None:
        screen.fill((0, 0, 0))
        world = self._draw_world(assets, state)
        low = pygame.transform.scale(world, (int(RENDER_WIDTH), int(RENDER_HEIGHT)))
        screen.blit(pygame.transform.scale(low, screen.get_size()), (0, 0))

        width, height = screen.get_size()
        message_pos = (width / 2.0, height / 1.1)
        if state.show_found_text and state.found_text_timer > 0.0:
            self._text(screen, assets.font(40), FOUND_TEXT, message_pos)
            state.found_text_timer -= dt * 60.0
        if state.show_hint and state.show_hint_timer > 0.0:
            self._text(screen, assets.font(40), HINT_TEXT, message_pos)
            state.show_hint_timer -= dt * 60.0

        if state.scene is Scene.START:
            self._draw_title(screen, assets, state, clicked)
        if state.scene is Scene.END:
            self._overlay(screen, (0, 0, 0, _rgba(Color(0.0, 0.0, 0.0, state.death_scene.fade))[3]))
            if state.death_scene.show_text:
                self._text(screen, assets.font(40), "The end...", (width / 2.0, height / 2.0))

    def _draw_world(self, assets: _Assets, state: GameState) -> pygame.Surface:
        camera = state.camera
        size = (int(camera.work_size[0]), int(camera.work_size[1]))
        surface = pygame.Surface(size, pygame.SRCALPHA)
        to_screen = camera.world_to_screen

        if state.monster.activated:
            surface.blit(assets.monster_image, to_screen(*state.monster.pos))

        for beacon in state.beacons:
            if beacon.visible:
                center = to_screen(beacon.pos[0] + 20.0, beacon.pos[1] + 20.0)
                pygame.draw.circle(surface, _rgba(Color(0.8, 0.0, 0.8, 1.0)), center, 10, 4)

        if state.scene is not Scene.START:
            player = state.player
            rotated = pygame.transform.rotate(assets.player_image, -player.direction)
            center = to_screen(player.pos[0] + SPRITE_OFFSET, player.pos[1] + SPRITE_OFFSET)
            surface.blit(rotated, rotated.get_rect(center=center))
            for x, y in player.sonar_ring():
                surface.fill(_rgba(PURPLE), pygame.Rect(to_screen(x, y), (2, 2)))

        friend = state.friend
        if friend.show:
            angle = math.degrees(friend.facing(state.player.pos))
            rotated = pygame.transform.rotate(assets.player_image, -angle)
            center = to_screen(friend.pos[0] + SPRITE_OFFSET, friend.pos[1] + SPRITE_OFFSET)
            surface.blit(rotated, rotated.get_rect(center=center))

        tile = pygame.Surface((5, 5), pygame.SRCALPHA)
        for echo in state.visible_echoes():
            tile.fill(_rgba(echo.color))
            surface.blit(tile, to_screen(*echo.pos))

        return surface

    def _draw_title(
        self, screen: pygame.Surface, assets: _Assets, state: GameState, clicked: bool
    ) -> None:
        width, height = screen.get_size()
        self._overlay(screen, (0, 0, 0, 100))

        button = pygame.Rect(width / 4.0 - 120.0, height / 2.0 - 30.0, 240, 60)
        mx, my = pygame.mouse.get_pos()
        if (
            width / 4.0 - 120.0 < mx < width / 4.0 + 120.0
            and height / 2.0 - 30.0 < my < height / 2.0 + 30.0
        ):
            if clicked:
                state.start()
            highlight = pygame.Surface(button.size, pygame.SRCALPHA)
            highlight.fill(_rgba(Color(1.0, 1.0, 1.0, 0.25)))
            screen.blit(highlight, button.topleft)

        self._text(screen, assets.font(40), "START", (width / 4.0, height / 2.0))
        self._text(screen, assets.font(70), TITLE, (width / 2.0, height / 10.0))

        font = assets.font(22)
        lines = _wrap(font, STORY_TEXT, width / 2.5)
        line_height = font.get_linesize()
        top = height / 2.0 - line_height * len(lines) / 2.0
        for number, line in enumerate(lines):
            rendered = font.render(line, True, _rgba(WHITE))
            screen.blit(rendered, (width / 2.0, top + number * line_height))

    @staticmethod
    def _overlay(screen: pygame.Surface, rgba: tuple[int, int, int, int]) -> None:
        shade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        shade.fill(rgba)
        screen.blit(shade, (0, 0))

    @staticmethod
    def _text(
        screen: pygame.Surface,
        font: pygame.font.Font,
        text: str,
        center: tuple[float, float],
    ) -> None:
        rendered = font.render(text, True, _rgba(WHITE))
        screen.blit(rendered, rendered.get_rect(center=center))


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game with assets from the given directory."""
    parser = argparse.ArgumentParser(prog="blinddepths", description=TITLE)
    parser.add_argument(
        "assets",
        nargs="?",
        default="assets",
        help="directory holding cave.png, the sprites, the font and the sounds",
    )
    args = parser.parse_args(argv)
    Game(args.assets).run()
    return 0
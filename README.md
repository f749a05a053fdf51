# blinddepths

You are a submarine pilot in one of the deepest parts of the ocean. The only
way you can see is by the echoes you send out, which show the cave walls
around you. A colleague has gone missing in the cave system. Find him and
bring him back, and watch out for whatever else lives down there.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window, draws the game and plays
the sounds.

## What you have to supply

The package contains no images, font or sounds. The game loads them from an
assets directory, which must hold:

- `cave.png`: the cave map. Black pixels are open water. Red pixels absorb
  echoes. Any other colour is a wall that reflects echoes and bounces the
  submarine back. Map lookups assume a map 2017 pixels wide and 2216 pixels
  high.
- `player.png` and `monster.png`: the sprites.
- `slkscr.ttf`: the font.
- `ambiance.mp3`, `jumpscare.mp3`, `creepy_cave.mp3`, `monster.mp3`,
  `echo_scary.wav`, `more_scary.wav`, `scary_sound.mp3` and
  `short_scary.wav`: the sounds.

## Playing

```
blinddepths [ASSETS]
```

`ASSETS` is the assets directory. If you leave it out, the game uses
`assets` in the current directory. Click **START** on the title screen to
begin.

Controls:

- **A** / **D**: turn
- **W**: accelerate
- **Space**: send an echo
- **B**: place a beacon. You only have 3. A beacon keeps sending echoes from
  the place you left it, which helps with finding your way and with marking
  places.

## Using it as a library

The game logic is made of plain Python objects, so you can run it without a
window:

- `blinddepths.world` has `Scene`, the `Color` dataclass (with
  `with_alpha`), `get_bg_color(pixels, x, y)` for looking up the colour of
  the cave map at a point, and `map_range`.
- `blinddepths.camera.Camera2D` is a 2-D camera with a position and a zoom.
  Its `transform()` returns the camera matrix and `world_to_screen(x, y)`
  converts a world point to camera coordinates.
- `blinddepths.echo.Echo` is a single sonar particle. `make_echoes(pos,
  direction, color)` returns a ring of 61 echoes.
- `blinddepths.beacon.Beacon`, `blinddepths.friend.Friend`,
  `blinddepths.monster.Monster` and `blinddepths.player.Player` are the other
  actors. `blinddepths.player.Controls` holds the input for one frame.
- `blinddepths.game.GameState(pixels)` holds a whole game:
  - `start()` leaves the title screen.
  - `update(controls, dt, elapsed, rng)` moves everything forward one frame
    and returns the indices of the sounds to play. `rng` is, for example, a
    `random.Random`.
  - Setting `beacon_requested` places a beacon on the next update.
  - `visible_echoes()` returns the echoes near the camera.
- `blinddepths.game.load_cave_pixels(path)` loads an image as RGBA bytes.
- `blinddepths.game.SoundSystem` plays a fixed bank of sounds.
- `blinddepths.game.Game(assets_dir).run()` opens the window.

## Running the tests

```
pip install .[test]
pytest
```
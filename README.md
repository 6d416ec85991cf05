# pigsgame

Game logic for a small 2D side-scrolling platformer, built on pygame.
The player character, Liv, runs, double-jumps and dashes over a tile map
where pigs wander about or follow scene scripts, and cannons fire cannon
balls. The package provides the characters, their animations, scripted
scenes, and the collision handling between characters and with the map.

Times are in milliseconds throughout. World coordinates grow to the right
and upwards; the functions in `pigsgame.drawing` turn them into window
coordinates (960 x 540 window, sprites scaled by 3).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `pigsgame.geometry`: `Vector2D` (component-wise `+`, `-`, scalar `*`,
  `as_int()`), `Region2D`, `RGBColor`, the enums `CollisionType` and
  `CollisionSide`, `CollisionRegionInformation` (current and previous
  collision boxes) and `check_aabb_collision`, for which touching edges do
  not count as overlap.
- `pigsgame.state_timeout`: `StateTimeout`, a one-shot countdown that
  calls its callback once `restart()` was called and `update()` has used
  up the time.
- `pigsgame.controller`: `GameController` maps keys to `ControllerAction`
  values and tracks each as a `ControllerState` (`NOT_PRESSED`,
  `JUST_PRESSED`, `PRESSED`). `update(keyboard_state)` takes any table
  indexed by pygame key codes and falls back to `pygame.key.get_pressed()`.
  A shared instance is available as `game_controller`.
- `pigsgame.game_map`: `GameMap`, a `height` by `width` grid of tile ids
  starting at zero, with a list of `InteractableInfo` placements.
  Negative sizes raise `ValueError`.
- `pigsgame.time_handler`: `GameTimeHandler` measures `elapsed_time`
  between updates and counts `fps`; the clock can be injected.
- `pigsgame.window_shaker`: `WindowShaker` returns a random offset of
  -1, 0 or 1 per axis for 300 ms after `start_shake()`.
- `pigsgame.drawing`: `to_world_position`, `to_camera_position`, sprite
  drawing (`draw_sprite`, `draw_static_sprite`, `draw_direct_sprite`),
  `draw_filled_region`, `draw_line`, and bitmap-font text: `gout` writes a
  message using a mapping from characters to glyph cells (unknown
  characters are drawn as `'?'`) and returns the region it covers;
  `gstr_width` gives the scaled width of a string.
- `pigsgame.transition`: `TransitionAnimation`, a black wipe that covers
  the screen left to right, calls the registered callback once the screen
  is black, waits 500 ms, then clears. Its `state` is a
  `TransitionAnimationState`.
- `pigsgame.animation`: `Animation` cycles through spritesheet grid frames
  and can call a function when a cycle ends.
- `pigsgame.scene_script`: `SceneScript`, a list of numbered steps run one
  after another, with the steps `WaitTime`, `WalkTo`, `FaceTo`, `Talk`,
  `WaitScriptEvent`, `SetAngry`, `SetFear` and `RunLambdaEvent`.
  `active_script_line` gives the running line's number, or one past the
  last once the script is done.
- `pigsgame.assets`: `AssetsRegistry.load(base_dir)` reads the shared
  images from `<base_dir>/assets/sprites`; a missing or unreadable image
  raises `AssetLoadError` and nothing is replaced. A shared instance is
  available as `assets_registry`.
- `pigsgame.sound`: `SoundHandler` loads the `title_screen` and `forest`
  music and the `hit` sound from `<base_dir>/assets/music/*.ogg` and plays
  them by name. Problems are logged as warnings and never raised. It can be
  used as a context manager; `close()` shuts the mixer down. A shared
  instance is available as `sound_handler`.
- `pigsgame.characters.base`: `GameCharacter`, the abstract interface of
  every character.
- `pigsgame.characters.liv`: `Liv`, the player character.
- `pigsgame.characters.pig`: `Pig`, which wanders at random or follows a
  `SceneScript`, can talk in a speech balloon, and is hurt by dangerous
  tiles and cannon balls.
- `pigsgame.characters.cannon`, `pigsgame.characters.cannon_ball` and
  `pigsgame.characters.pig_with_matches`: `Cannon`, `CannonBall` and
  `PigWithMatches`, a pig that periodically fires its cannon.
- `pigsgame.characters.builder`: `build_game_characters(surface, game_map,
  assets)` creates Liv from the first interactable with id 0 and a pig for
  every interactable with id 1. `assets` maps the sprite file names
  `liv23x26.png`, `jump-smoke.png` and `pig80x80.png` to loaded images.
- `pigsgame.character_collision`: `compute_characters_collisions` resolves
  pig/Liv, cannon ball/Liv and cannon ball/pig contacts, then removes dead
  pigs from the list in place.
- `pigsgame.tilemap_collision`: `compute_tilemap_collisions(game_map,
  character)` pushes a character out of solid tiles (32 pixels each);
  anything outside the map counts as solid.

## Example

```python
from collections import defaultdict

import pygame

from pigsgame.controller import ControllerAction, GameController
from pigsgame.geometry import Region2D, check_aabb_collision
from pigsgame.state_timeout import StateTimeout

assert check_aabb_collision(Region2D(0, 0, 10, 10), Region2D(5, 5, 10, 10))
assert not check_aabb_collision(Region2D(0, 0, 10, 10), Region2D(10, 0, 10, 10))

fired = []
timeout = StateTimeout(300.0, lambda: fired.append(True))
timeout.restart()
timeout.update(300.0)
assert fired == [True]

controller = GameController()
keys = defaultdict(bool, {pygame.K_SPACE: True})
controller.update(keys)
assert controller.just_pressed(ControllerAction.JUMP)
controller.update(keys)
assert controller.is_pressed(ControllerAction.JUMP)
```

## What the package does not do

There is no command to start the game and no main loop: the package opens
no window, has no title screen, levels or menus, and reads no level files.
A program using it creates the pygame display, builds a `GameMap`, calls
the characters' `update`, the collision functions and `run_animation`
each frame, and draws the tiles itself. Keys and other collectable items
are not part of the package, so `build_game_characters` only creates Liv
and pigs.
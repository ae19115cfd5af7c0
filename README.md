# nightcrawl

The game logic of a side-scrolling castle action game, with no rendering
attached. Everything here is plain Python with no third-party dependencies.

## Modules

- `nightcrawl.vector`: `Vector2`, a mutable 2D vector that supports `+`, `-`
  and multiplication by a number, and unpacks as `x, y`.
- `nightcrawl.defines`: the enums `EntityId`, `Status` (combinable flags),
  `Direction` (combinable flags) and `SoundId`.
- `nightcrawl.timing`: `TimeSpan` (a duration in 100 ns ticks), `GameTime`
  (elapsed and total game time from a nanosecond clock, ignoring updates less
  than 16 ms apart; the clock can be passed in) and `StopWatch`
  (`is_stop_watch` fires once after a delay, `is_time_loop` and
  `time_loop_action` fire repeatedly). Times are in game milliseconds.
- `nightcrawl.camera`: `Camera`, a view rectangle; `follow` keeps a target a
  third of the view from the left edge, clamped to the map.
- `nightcrawl.animation`: `Frame` rectangles and `Animation`, which advances one
  frame each time its frame time passes and wraps around.
- `nightcrawl.collision`: `Collider`, `StairCollider` and `StairDirection`;
  swept AABB tests (`swept_aabb`, `sweep`, `scan`, `filter_events`) and
  `process`, which moves a collider and stops it just short of blocking
  colliders. `optimized_colliders_from_tile_map` merges solid tiles into as few
  rectangles as it can; `stair_colliders_from_tile_map` makes one stair collider
  per stair tile (1 rises to the left, 2 rises to the right and is a stair top).
- `nightcrawl.tilemap`: `TileMap`, which loads a whitespace-separated grid of
  tile ids (`load_map_data` raises `ValueError` for an empty or ragged grid) and
  lists `DrawCommand`s for a camera; `classify_tiles`, which sorts tileset ids
  into solid (0), stair (1) and empty (-1) tiles.
- `nightcrawl.game_object`: `GameObject`, the abstract base with position,
  velocity, status flags and an `update` method.
- `nightcrawl.info`: `Info`, the player's hit points (capped at 16), hearts
  (99 at most), lives, score and stage timer.
- `nightcrawl.items`: `ItemType`, `Item` (drifts downwards, expires after five
  seconds), `BreakableItem` and `item_sprite_rects`.
- `nightcrawl.weapons`: `WeaponType`, `Weapon`, `Whip` (levels 1 to 5, swung
  for 0.9 s) and `Axe` (thrown in an arc until it falls below the ground line).
- `nightcrawl.enemy`: `Enemy`, which walks, attacks and dies according to its
  `Status` and plays one animation per status.
- `nightcrawl.player`: `PlayerState` and `Player`, with walking, jumping,
  sitting, climbing stairs, attacks in the air and on the ground, weapon
  switching and whip upgrades.

## Keyboard controls

`Player.on_key_pressed` and `Player.on_key_released` take a letter or a virtual
key code (the arrow keys are `VK_LEFT`, `VK_UP`, `VK_RIGHT`, `VK_DOWN` in
`nightcrawl.player`):

| Key | Action |
| --- | --- |
| A / Left, D / Right | walk (only on the ground) |
| K | jump |
| L | sit down |
| W / Up, S / Down | climb the stair the player stands on |
| J | attack with the current weapon |
| I | switch between whip and axe |
| O | upgrade the whip |
| G | log the number of ground colliders |

## Example

```python
from nightcrawl.collision import Collider, optimized_colliders_from_tile_map, process

grid = [
    [-1, -1, -1],
    [0, 0, 0],
]
ground = optimized_colliders_from_tile_map(grid, 50, 0)

box = Collider(10, 0, 32, 40, vx=0, vy=100)
process(box, 0.5, ground)
print(box.position())  # the box stops just above the ground, at y = 9.99
```

The grid passed to `optimized_colliders_from_tile_map` is left unchanged.

## What it does not do

The package draws nothing, opens no window, reads no keyboard and loads no
images: textures are opaque values handed in by the caller, and
`TileMap.draw_commands` only lists what to draw and where. There is no game
loop and no command to start a game; a program using the package calls
`Player.update`, `Camera.follow` and the drawing of its choice once per frame.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```
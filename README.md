# brickbreak

A small brick-breaking arcade game built on pygame. You move a paddle along the bottom of the window and bounce a ball into rows of bricks. Breakable bricks disappear when the ball hits them. Solid bricks stay where they are.

## Installing

```
pip install .
```

This also installs `pygame`.

## Playing

```
brickbreak
```

The command needs a resources directory. By default this is `Resources` in the current directory, and it must have this layout:

```
Resources/
  textures/
    block.png
    block_solid.png
    paddle.png
    awesomeface.png
    background.jpg
  levels/
    one.lvl
    two.lvl
    three.lvl
    four.lvl
```

If a texture cannot be loaded, the command prints an error and exits with status 1. A level file that is missing or cannot be read gives a level with no bricks.

Options:

- `--width`, `--height`: window size in pixels. The default is 720 by 480.
- `--title`: window caption. The default is `Demo`.
- `--resources DIR`: the directory that holds `textures/` and `levels/`.
- `--frames N`: stop after N frames. The default, `0`, runs until the window is closed.

Controls:

- `A` or `Left`: move the paddle left.
- `D` or `Right`: move the paddle right.
- `Space`: launch the ball from the paddle.
- `Escape`, or closing the window: quit.

The ball bounces off the side walls and the top of the window. Its new angle depends on where it hits the paddle, and its speed stays the same. If it falls past the bottom edge you lose a life, and the ball goes back onto the paddle. When all three lives are gone, the current level is reloaded from its file and your lives are restored.

## Level files

A level is a plain text file with one row of bricks per line. Each line is a list of integer tile codes separated by single spaces:

- `0`: empty space
- `1`: a solid brick that cannot be destroyed
- `2` to `5`: breakable bricks, each in its own colour

```
1 1 1 1 1 1
2 2 0 0 2 2
3 3 4 4 3 3
```

A row is only counted once its newline is read, so the file should end with a newline. The first row decides how many columns the level has. A shorter row later in the file raises `ValueError`. The grid is stretched to fill the full width and the upper half of the window.

## Using the pieces from code

None of the game logic needs a display:

- `brickbreak.level.parse_level(text)` turns level text into rows of tile codes.
- `brickbreak.level.GameLevel` loads or builds bricks (`load`, `build`). It reports `is_completed()` and can `draw(renderer)`.
- `brickbreak.gameobject.GameObject` is a positioned, sized, tinted sprite.
- `brickbreak.gameobject.BallObject` adds `move(dt, window_width)` and `reset(position, velocity)`.
- `brickbreak.collision` provides `check_aabb` and `check_ball_collision`. The latter returns a `Collision` with a `Direction`. `vector_direction` gives the compass direction of a vector.
- `brickbreak.particles.ParticleGenerator` keeps a fixed pool of `Particle` objects. It spawns them with `update`, and `alive()` yields the living ones.
- `brickbreak.resources.ResourceManager` loads textures by name and hands them out.
- `brickbreak.game.Breakout` holds the game state. Call `update(dt, actions)` with a set of `Action` values, and `draw(renderer)`. `load_levels(paths)` loads the levels.
- `brickbreak.vecmath` provides `Vec2` and 4x4 matrix helpers: `identity`, `translate`, `scale`, `ortho`, `rotate`, `rotate_y`, `rotate_z`, `mat_mul`, `clamp`, `clamp_vec`.

A renderer is any object with a `draw_sprite(sprite, position, size, rotation, color)` method. `brickbreak.app.PygameRenderer` draws onto a pygame surface.

## What it does not do

- It ships no textures or level files. You must supply them.
- The game never moves on to the next level, and it has no menu or win screen. It always plays the first level.
- The particle generator is available as a library piece, but the game does not use or draw it.

## Tests

```
pip install .[test]
pytest
```
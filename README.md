# verletsim

An interactive 2D particle simulation built on Verlet integration. Balls of
random size and colour are launched into a circular container, fall under
gravity, and push each other apart. A uniform spatial grid keeps collision
checks local.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
verletsim
```

A 1920×1080 window opens with one white ball inside a large circle.
Pass `--seed N` to make the sizes and colours of launched balls repeatable:

```
verletsim --seed 42
```

| Key     | Action                                                    |
|---------|-----------------------------------------------------------|
| `F`     | Launch a new ball (at most one every 50 ms)               |
| `Space` | Pause or resume the simulation                            |
| `S`     | While paused, advance by a single frame                   |
| `C`     | Log the object count and the last frame time to stderr    |

Close the window to quit.

## How it works

Every frame is split into six sub-steps. In each sub-step every object:

1. receives a downward gravity of 500 px/s²,
2. is kept inside the container (centre `(1000, 500)`, radius 500),
3. moves by position-Verlet: `x' = 2x − x_prev + a·dt²`.

Then the objects are sorted into a 10×10 grid of cells (192×108 px each) and
each object is separated from any overlapping object in its own cell and the
eight cells around it. An object whose position maps outside the grid makes
`VerletWorld.update_grid` raise `IndexError`.

New balls, of radius 4 to 24, are launched from `(1000, 250)` with an initial
kick whose direction sweeps back and forth across the lower half-circle in 4°
steps.

## Using it as a library

```python
from verletsim.physics import VerletObject, VerletWorld, Spawner

world = VerletWorld()
world.add(VerletObject(1000.0, 400.0, 20.0))

spawner = Spawner()
for _ in range(10):
    spawner.spawn(world)

for _ in range(60):
    world.simulate(1 / 60)

for obj in world.objects:
    print(obj.position, obj.radius)
```

`Spawner` accepts a `random.Random` for reproducible runs. The module-level
`solve_collision(first, second)` separates a single pair of overlapping
objects.

`verletsim.vmath` provides the small vector helpers (`magnitude`, `add`,
`minus`) on `(x, y)` tuples, and `verletsim.render` provides the circle
geometry (`circle_fan`, `circle_outline_points`,
`round_up_to_multiple_of_eight`) together with the functions that draw it on a
pygame surface (`render_circle`, `draw_circle`).

`verletsim.app.App` holds the interactive state and can be driven without a
window: `handle_key(name, now_ms)` takes a key name (`"f"`, `"space"`, `"s"`,
`"c"`), `advance()` runs one frame, `status()` returns the status line, and
`draw(surface)` renders onto any pygame surface.

## What it does not do

There is no mouse interaction, no way to remove balls, and no saving or
loading of a simulation; the container, gravity and window size are fixed.
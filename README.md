# orbitsim

orbitsim is a small two-dimensional rigid-body simulator. It models circular
bodies with a name, mass, radius and colour. By default, each body pulls on
another body by gravity. Instead, the bodies can bounce off each other and off
the walls of a square world that runs from -1 to 1 on each axis. A pygame
window draws the bodies as filled circles. You can pan and zoom the view, and
you can pause the simulation.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running the simulation

```
orbitsim
```

This opens an 800×800 window with three bodies, named A, B and C. Physics runs
at a fixed step of 0.016 s. Each frame, the elapsed real time is added to an
accumulator, and as many whole steps are taken as fit into it.

Options:

| Option               | Effect                                                   |
|----------------------|----------------------------------------------------------|
| `--size N`           | window width and height in pixels (default 800)          |
| `--no-interpolation` | take exactly one step per frame instead of timing steps  |
| `--collisions`       | bounce bodies off each other and the walls instead of attracting them |
| `--gravity`          | pull bodies downwards (has an effect only with `--collisions`) |

Keys:

| Key   | Action                                         |
|-------|------------------------------------------------|
| P     | pause / resume                                 |
| W / S | move camera up / down                          |
| A / D | move camera left / right                       |
| Z / X | zoom in / out (zoom stays between 0.5 and 2.0) |

## Using it as a library

```python
from orbitsim.physics import orbit, update_physics
from orbitsim.app import Simulation, default_bodies

bodies = default_bodies()
orbit(bodies, 0.016)                       # one step of mutual attraction
update_physics(bodies, 0.016, 0.9, True)   # collisions, downward gravity, wall bounces

sim = Simulation()
positions = sim.advance(0.5)   # run the fixed steps that fit into 0.5 s
sim.toggle_pause()             # returns the new paused state
```

The package has these modules:

- `orbitsim.physics`: holds the `Vec2` and `RigidBody` classes. It also has
  `orbit`, `update_physics` and `interpolate`. `interpolate` blends each body's
  previous and current position.
- `orbitsim.camera`: `Camera2D` stores the position and zoom.
  `process_input` takes the held keys as names such as `"w"`. `camera_matrix()`
  returns the orthographic projection times the view matrix as a 4×4 numpy
  array, applied as `matrix @ point`.
- `orbitsim.app`:
  - `Simulation` runs the fixed-step loop.
  - `Renderer` draws the bodies on a pygame surface.
  - `default_bodies()` returns the three starting bodies.
  - `main` is the `orbitsim` command.
- `orbitsim.shader`: `parse_shader` and `parse_shader_source` split a combined
  shader text into `ShaderProgramSource`, with vertex and fragment sections. The
  sections are marked with `#shader vertex` and `#shader fragment` lines.
- `orbitsim.layout`: `VertexBufferLayout` describes interleaved vertex
  attributes: their `ElementType`, their counts and the stride in bytes.
- `orbitsim.vertices`: `build_buffer_data` turns bodies into a flat float32
  array. Each quad corner gets eight values: corner x, corner y, centre x,
  centre y, radius, red, green and blue.

## What it does not do

- The window draws only the bodies, as plain circles, on a black background.
  It draws no grid and uses no GPU shaders.
- `orbitsim.shader`, `orbitsim.layout` and `orbitsim.vertices` only prepare
  text, layouts and arrays. Nothing in the package compiles shaders or uploads
  buffers to a graphics card.
- `Simulation.advance` returns interpolated positions, but the window draws each
  body's current position.

## Tests

```
pytest
```
# summit_surveyor

The simulation core of a ski resort game. It models the terrain, ski lifts,
the graph that skiers move through and the way skiers choose which lifts to
ride. It also provides cameras and input handling for a front end to build on.

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

- `summit_surveyor.graph`: `GraphNode`, `GraphWeight` (an integer weight, or
  infinity when `value` is None), the `GraphLayer` interface with
  `graph_type`, `children` and `distance`, the layer kinds `TerrainType` and
  `LiftType`, `Path`, and `dijkstra(source, destination, layers)`, which
  searches across several layers at once. A negative edge weight raises
  `ValueError`; an unreachable destination gives a path holding only the
  destination.
- `summit_surveyor.transform`: the immutable `Transform` (position, scale,
  pitch, yaw, roll) with `matrix`, `to_bytes`, `with_scale`,
  `with_translation`, `with_yaw` and `translate`, and 4x4 matrix helpers:
  `translation_matrix`, `scaling_matrix`, `euler_rotation`, `perspective`,
  `look_at_rh` and `matrix_bytes` (column-major 32-bit floats).
- `summit_surveyor.camera`: the `Camera` base class, `FPSCamera` and
  `ThirdPersonCamera`. Cameras give view and projection matrices, can be
  moved, rotated and zoomed, and `cast_mouse_ray` returns a `Ray` through a
  mouse position in [-1, 1] screen space.
- `summit_surveyor.event`: the input events (`MouseMoved`, `MouseDown`,
  `MouseUp`, `KeyDown`, `KeyUp`, `ScrollStart`, `ScrollContinue`,
  `ScrollEnd`, with `MouseButton`), the `EventCollector` that gathers them
  each frame, and `EventListener` hit boxes with nested sublisteners,
  fed by `send_events`.
- `summit_surveyor.model`: `RenderLayer`, `ModelRenderData`, and
  `screen_plane_mesh(z)`, the vertex bytes and indices of a full-screen quad.
- `summit_surveyor.lift`: `LiftLayer`, which joins the bottom of a lift to its
  top at a cost of one, `add_lift`, and `LiftBuilderState` with `LiftBuild`
  and `LiftTop`, the state machine for placing lifts with the mouse.
- `summit_surveyor.controls`: `apply_camera_controls(camera, events)`, which
  moves a camera with the W, A, S and D keys, rotates it while the left mouse
  button is held and zooms it with the scroll wheel.
- `summit_surveyor.terrain`: `Grid`, `Terrain` (made with `Terrain.flat` or
  `Terrain.cone`) with `height`, `mesh_vertices` and `graph_layer`, and
  `TerrainGraphLayer`, which joins each cell to its four neighbours.
- `summit_surveyor.decision_tree`: `DecisionCost`, `GoToLift`, `decisions`
  and `DecisionTree`, which finds the cheapest sequence of lift rides.
  `DecisionTree.create` raises `ValueError` when there are no lifts.
- `summit_surveyor.skier`: `FollowPath`, which moves along a list of points,
  and `Skier`, which follows its planned route and plans a new one on reaching
  the end.

## Example

```python
from summit_surveyor.graph import GraphNode, dijkstra
from summit_surveyor.lift import add_lift
from summit_surveyor.terrain import Terrain
from summit_surveyor.skier import Skier

terrain = Terrain.cone((100, 100), (50.0, 50.0), -1.0, 50.0)
layers = [terrain.graph_layer()]
add_lift(GraphNode(0, 0), GraphNode(70, 70), layers)

path = dijkstra(GraphNode(5, 5), GraphNode(0, 0), layers)
print(path.cost())

skier = Skier.create(GraphNode(0, 0), layers, terrain)
skier.step(0.016, layers, terrain)
print(skier.transform.position)
```

## What the package does not do

It draws nothing and opens no window. There is no game loop, no command to
start the game, no GUI widgets and no text rendering: the package produces
matrices, vertex data, events and simulation state, and a front end has to
supply the window, the rendering and the frame loop that calls into it.
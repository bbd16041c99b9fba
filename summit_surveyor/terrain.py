"""Height-field terrain, its render mesh and its walking graph layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, TypeVar

import numpy as np

from .graph import INFINITY, GraphLayer, GraphNode, GraphWeight, TerrainType

T = TypeVar("T")

_STEP_WEIGHT = GraphWeight(1)


def _dims(dimensions: Iterable[int]) -> tuple[int, int]:
    x, y = dimensions
    x, y = int(x), int(y)
    if x < 0 or y < 0:
        raise ValueError(f"dimensions must not be negative, got ({x}, {y})")
    return x, y


@dataclass
class Grid(Generic[T]):
    """A two-dimensional grid stored row by row along x."""

    data: list[T] = field(default_factory=list)
    dimensions: tuple[int, int] = (0, 0)

    @classmethod
    def from_fn(cls, f: Callable[[int, int], T], dimensions: Iterable[int]) -> Grid[T]:
        """Build a grid whose cell (x, y) holds ``f(x, y)``."""
        dx, dy = _dims(dimensions)
        data = [f(x, y) for x in range(dx) for y in range(dy)]
        return cls(data, (dx, dy))

    def _offset(self, key: tuple[int, int]) -> int:
        x, y = key
        dx, dy = self.dimensions
        if not (0 <= x < dx and 0 <= y < dy):
            raise IndexError(f"({x}, {y}) is outside grid of size ({dx}, {dy})")
        return x * dy + y

    def __getitem__(self, key: tuple[int, int]) -> T:
        return self.data[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        self.data[self._offset(key)] = value


@dataclass(eq=False)
class Terrain:
    """Terrain heights indexed as ``heights[x, y]``."""

    heights: np.ndarray

    @property
    def dimensions(self) -> tuple[int, int]:
        rows, cols = self.heights.shape
        return rows, cols

    @classmethod
    def flat(cls, dimensions: Iterable[int]) -> Terrain:
        """Terrain of the given size with every height zero."""
        dx, dy = _dims(dimensions)
        return cls(np.zeros((dx, dy), dtype=np.float32))

    @classmethod
    def cone(
        cls,
        dimensions: Iterable[int],
        center: Iterable[float],
        slope: float,
        center_height: float,
    ) -> Terrain:
        """Cone-shaped terrain: height changes by ``slope`` per unit of distance from ``center``."""
        dx, dy = _dims(dimensions)
        cx, cy = (float(c) for c in center)
        xs = np.arange(dx, dtype=np.float64)[:, None]
        ys = np.arange(dy, dtype=np.float64)[None, :]
        radius = np.sqrt((xs - cx) ** 2 + (ys - cy) ** 2)
        return cls((center_height + radius * slope).astype(np.float32))

    def height(self, x: int, y: int) -> float:
        """Height used for an object standing at grid position (x, y)."""
        if x < 0 or y < 0:
            raise IndexError(f"({x}, {y}) has a negative coordinate")
        return float(self.heights[y + 1, x + 1])

    def mesh_vertices(self) -> np.ndarray:
        """Triangle vertices of the terrain surface.

        Each row is a position (x, y, z), texture coordinates (u, v) and a
        normal (x, y, z); every grid cell contributes two triangles.
        """
        dx, dy = self.dimensions
        if dx == 0 or dy == 0:
            raise ValueError("terrain has no cells to build a mesh from")
        h = self.heights
        rows: list[list[float]] = []
        for x in range(dx - 1):
            for y in range(dy - 1):
                x0_y0 = np.array([x, h[x, y], y], dtype=np.float64)
                x0_y1 = np.array([x, h[x, y + 1], y + 1], dtype=np.float64)
                x1_y0 = np.array([x + 1, h[x + 1, y], y], dtype=np.float64)
                x1_y1 = np.array([x + 1, h[x + 1, y + 1], y + 1], dtype=np.float64)
                n0 = np.cross(x0_y1 - x0_y0, x1_y0 - x0_y0)
                n0 = n0 / np.linalg.norm(n0)
                n1 = np.cross(x1_y0 - x1_y1, x0_y1 - x1_y1)
                n1 = n1 / np.linalg.norm(n1)
                for position, uv, normal in (
                    (x0_y0, (0.0, 0.0), n0),
                    (x0_y1, (0.0, 1.0), n0),
                    (x1_y0, (1.0, 0.0), n0),
                    (x0_y1, (0.0, 1.0), n1),
                    (x1_y1, (1.0, 1.0), n1),
                    (x1_y0, (1.0, 0.0), n1),
                ):
                    rows.append([*position, *uv, *normal])
        return np.array(rows, dtype=np.float32).reshape(-1, 8)

    def graph_layer(self) -> TerrainGraphLayer:
        """Walking graph over the terrain grid."""
        rows, cols = self.heights.shape
        heights = self.heights
        grid = Grid.from_fn(lambda x, y: float(heights[y, x]), (cols, rows))
        return TerrainGraphLayer(grid)


@dataclass(eq=False)
class TerrainGraphLayer(GraphLayer):
    """Graph joining each grid cell to its four neighbours at a cost of one."""

    grid: Grid[float]

    def graph_type(self) -> TerrainType:
        return TerrainType()

    def children(self, point: GraphNode) -> list[tuple[GraphNode, GraphWeight]]:
        x, y = point.x, point.y
        dx, dy = self.grid.dimensions
        candidates = (
            (x > 0, GraphNode(x - 1, y)),
            (y > 0, GraphNode(x, y - 1)),
            (x < dx - 1, GraphNode(x + 1, y)),
            (y < dy - 1, GraphNode(x, y + 1)),
        )
        return [(node, _STEP_WEIGHT) for ok, node in candidates if ok]

    def distance(self, start: GraphNode, end: GraphNode) -> GraphWeight:
        for node, weight in self.children(start):
            if node == end:
                return weight
        return INFINITY
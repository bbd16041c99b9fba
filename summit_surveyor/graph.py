"""Weighted graph layers and shortest-path search across them."""

from __future__ import annotations

import heapq
import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Iterator, Sequence, Union


@dataclass(frozen=True)
class GraphNode:
    """A grid position used as a graph vertex."""

    x: int
    y: int


@total_ordering
@dataclass(frozen=True)
class GraphWeight:
    """Integer edge or path weight; a ``value`` of None means infinity."""

    value: int | None

    def is_finite(self) -> bool:
        return self.value is not None

    def __add__(self, other: object) -> GraphWeight:
        if not isinstance(other, GraphWeight):
            return NotImplemented
        if self.value is None or other.value is None:
            return INFINITY
        return GraphWeight(self.value + other.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GraphWeight):
            return NotImplemented
        if self.value is None:
            return False
        if other.value is None:
            return True
        return self.value < other.value

    def __str__(self) -> str:
        return "Infinity" if self.value is None else f"Some({self.value})"


INFINITY = GraphWeight(None)
ZERO = GraphWeight(0)


@dataclass(frozen=True)
class TerrainType:
    """Graph type of a terrain layer."""


@dataclass(frozen=True)
class LiftType:
    """Graph type of a lift running from ``start`` to ``end``."""

    start: GraphNode
    end: GraphNode


GraphType = Union[TerrainType, LiftType]


class GraphLayer(ABC):
    """One layer of the navigation graph."""

    @abstractmethod
    def graph_type(self) -> GraphType:
        """Return the kind of layer."""

    @abstractmethod
    def children(self, point: GraphNode) -> list[tuple[GraphNode, GraphWeight]]:
        """Return the nodes reachable from ``point`` with their edge weights."""

    @abstractmethod
    def distance(self, start: GraphNode, end: GraphNode) -> GraphWeight:
        """Return the weight joining two nodes, or infinity if not connected."""


@dataclass
class Path:
    """A sequence of nodes, each paired with the weight of the edge leaving it."""

    steps: list[tuple[GraphNode, GraphWeight]] = field(default_factory=list)

    def append(self, other: Path) -> Path:
        return Path([*self.steps, *other.steps])

    def cost(self) -> GraphWeight:
        return sum((weight for _, weight in self.steps), ZERO)

    def endpoint(self) -> GraphNode | None:
        return self.steps[-1][0] if self.steps else None

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> tuple[GraphNode, GraphWeight]:
        return self.steps[index]

    def __iter__(self) -> Iterator[tuple[GraphNode, GraphWeight]]:
        return iter(self.steps)

    def __str__(self) -> str:
        body = "".join(f"\t<{node.x}, {node.y}>: {weight}\n" for node, weight in self.steps)
        return "{\n" + body + "}\n"


def dijkstra(
    source: GraphNode, destination: GraphNode, layers: Sequence[GraphLayer]
) -> Path:
    """Find the cheapest path from ``source`` to ``destination`` over all layers.

    Edge weights must not be negative; a negative weight raises ValueError.
    If the destination is unreachable the path holds only the destination.
    """
    order = itertools.count()
    queue: list[tuple[GraphWeight, int, GraphNode]] = [(ZERO, next(order), source)]
    distance: dict[GraphNode, GraphWeight] = {source: ZERO}
    previous: dict[GraphNode, tuple[GraphNode, GraphWeight]] = {}

    while queue:
        best, _, vertex = heapq.heappop(queue)
        if distance[vertex] < best:
            continue
        for layer in layers:
            for child, weight in layer.children(vertex):
                if weight < ZERO:
                    raise ValueError(f"negative graph weight {weight}")
                total = weight + best
                known = distance.get(child)
                if known is None or total < known:
                    distance[child] = total
                    previous[child] = (vertex, weight)
                    heapq.heappush(queue, (total, next(order), child))

    steps = [(destination, ZERO)]
    node = destination
    while node in previous:
        node, weight = previous[node]
        steps.append((node, weight))
    steps.reverse()
    return Path(steps)
"""Skiers that follow planned paths across the terrain and replan at the end."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Union

from .decision_tree import DecisionCost, DecisionTree
from .graph import GraphLayer, GraphNode, Path
from .model import ModelRenderData
from .terrain import Terrain
from .transform import Transform, Vec3

# Path points advanced per second of game time.
SKIER_SPEED = 1000.0

NodeLike = Union[GraphNode, Iterable[int]]


def _node(value: NodeLike) -> GraphNode:
    if isinstance(value, GraphNode):
        return value
    x, y = value
    return GraphNode(int(x), int(y))


def _points(path: Path, terrain: Terrain) -> list[Vec3]:
    """World positions of the nodes of ``path``, standing on ``terrain``."""
    return [
        (float(node.x), terrain.height(node.x, node.y), float(node.y))
        for node, _ in path
    ]


@dataclass
class FollowPath:
    """Progress along a list of points; ``t`` counts points passed."""

    start: GraphNode
    end: GraphNode
    points: list[Vec3]
    t: float = 0.0

    @classmethod
    def from_path(cls, path: Path, terrain: Terrain) -> FollowPath:
        """Follow ``path`` over ``terrain`` from its first node.

        Raises ValueError if the path is empty.
        """
        if len(path) == 0:
            raise ValueError("cannot follow an empty path")
        return cls(
            start=path[0][0],
            end=path.endpoint(),
            points=_points(path, terrain),
        )

    def incr(self, delta_t: float) -> Vec3:
        """Advance by ``delta_t`` points and return the new position."""
        self.t += delta_t
        lower = math.floor(self.t)
        upper = math.ceil(self.t)
        mix = self.t - lower
        if upper < len(self.points):
            a, b = self.points[lower], self.points[upper]
            return tuple(p * (1.0 - mix) + q * mix for p, q in zip(a, b))  # type: ignore[return-value]
        if lower < len(self.points):
            return self.points[lower]
        return self.points[-1]

    def at_end(self) -> bool:
        return self.t >= len(self.points)


@dataclass
class Skier:
    """A skier moving along its planned route."""

    follow: FollowPath
    transform: Transform
    decision_tree: DecisionTree
    cost: DecisionCost
    render_data: ModelRenderData = field(default_factory=ModelRenderData)

    @classmethod
    def create(
        cls, start: NodeLike, layers: Sequence[GraphLayer], terrain: Terrain
    ) -> Skier:
        """Plan a route from ``start`` and place the skier at its first point.

        Raises ValueError if there are no lifts to plan with.
        """
        tree, cost, path = DecisionTree.create(_node(start), layers)
        follow = FollowPath.from_path(path, terrain)
        transform = Transform().with_translation(follow.points[0])
        return cls(follow=follow, transform=transform, decision_tree=tree, cost=cost)

    def step(
        self, delta_seconds: float, layers: Sequence[GraphLayer], terrain: Terrain
    ) -> None:
        """Move along the path, then plan a new route once the end is reached."""
        position = self.follow.incr(SKIER_SPEED * delta_seconds)
        self.transform = self.transform.with_translation(position)
        if self.follow.at_end():
            tree, cost, path = DecisionTree.create(self.follow.end, layers)
            # The new route keeps the recorded start and end of the old one.
            self.follow = FollowPath(
                start=self.follow.start,
                end=self.follow.end,
                points=_points(path, terrain),
            )
            self.cost = cost
            self.decision_tree = tree
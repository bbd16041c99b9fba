"""Lift graph layers and the state machine that places new lifts."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable, MutableSequence, Optional, Union

from .graph import INFINITY, GraphLayer, GraphNode, GraphWeight, LiftType
from .model import RenderLayer

NodeLike = Union[GraphNode, Iterable[int]]

_LIFT_WEIGHT = GraphWeight(1)


def _node(value: NodeLike) -> GraphNode:
    if isinstance(value, GraphNode):
        return value
    x, y = value
    return GraphNode(int(x), int(y))


def _as_index(value: float) -> int:
    """Convert a coordinate to a grid index, saturating at zero."""
    value = float(value)
    if math.isnan(value) or value <= 0.0:
        return 0
    return int(value)


@dataclass(frozen=True)
class LiftLayer(GraphLayer):
    """A lift that carries skiers from ``start`` to ``end`` at a cost of one."""

    start: GraphNode
    end: GraphNode

    def graph_type(self) -> LiftType:
        return LiftType(self.start, self.end)

    def children(self, point: GraphNode) -> list[tuple[GraphNode, GraphWeight]]:
        if point == self.start:
            return [(self.end, _LIFT_WEIGHT)]
        return []

    def distance(self, start: GraphNode, end: GraphNode) -> GraphWeight:
        if start == self.start and end == self.end:
            return _LIFT_WEIGHT
        return INFINITY


def add_lift(
    bottom: NodeLike, top: NodeLike, layers: MutableSequence[GraphLayer]
) -> LiftLayer:
    """Add a lift from ``bottom`` to ``top`` to ``layers`` and return it."""
    layer = LiftLayer(_node(bottom), _node(top))
    layers.append(layer)
    return layer


class LiftBuild(enum.Enum):
    """Which lift station is being placed."""

    NONE = "none"
    FIRST = "first"
    SECOND = "second"


@dataclass
class LiftTop:
    """Marker for the top station preview.

    ``first_frame`` stays true until the preview has been active for one frame,
    so the click that selected it does not also place it.
    """

    first_frame: bool = True


@dataclass
class LiftBuilderState:
    """Progress of placing a new lift."""

    lift: LiftBuild = LiftBuild.NONE
    bottom_position: Optional[GraphNode] = None
    top_position: Optional[GraphNode] = None

    def advance(self) -> LiftBuild:
        """Move to the next build step, as when the lift button is clicked."""
        self.lift = {
            LiftBuild.NONE: LiftBuild.FIRST,
            LiftBuild.FIRST: LiftBuild.SECOND,
            LiftBuild.SECOND: LiftBuild.NONE,
        }[self.lift]
        return self.lift

    def update_bottom(
        self, location: Optional[Iterable[float]], first_down: bool
    ) -> RenderLayer:
        """Track the bottom station under the mouse; return its render layer.

        ``location`` is where the mouse ray hits the terrain, or None.
        A fresh left click fixes the bottom station and moves on to the top.
        """
        if self.lift != LiftBuild.FIRST:
            return RenderLayer.DO_NOT_RENDER
        if location is not None:
            x, y, _ = location
            self.bottom_position = GraphNode(_as_index(x), _as_index(y))
        if first_down:
            self.lift = LiftBuild.SECOND
        return RenderLayer.MAIN

    def update_top(
        self,
        lift_top: LiftTop,
        location: Optional[Iterable[float]],
        first_down: bool,
        layers: MutableSequence[GraphLayer],
    ) -> RenderLayer:
        """Track the top station under the mouse; return its render layer.

        A fresh left click after the first active frame ends placement and,
        when both stations are known, adds the lift to ``layers``.
        """
        if self.lift != LiftBuild.SECOND:
            return RenderLayer.DO_NOT_RENDER
        if location is not None:
            x, y, _ = location
            self.top_position = GraphNode(_as_index(x), _as_index(y))
        if first_down and not lift_top.first_frame:
            self.lift = LiftBuild.NONE
            if self.bottom_position is not None and self.top_position is not None:
                add_lift(self.bottom_position, self.top_position, layers)
        lift_top.first_frame = False
        return RenderLayer.MAIN
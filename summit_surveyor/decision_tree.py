"""Choices a skier can make, and a tree of them searched for the cheapest plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

from .graph import INFINITY, GraphLayer, GraphNode, GraphWeight, LiftType, Path, dijkstra


@dataclass(frozen=True)
class DecisionCost:
    """Cost of carrying out a decision and where the skier ends up."""

    cost: GraphWeight
    end: GraphNode

    @classmethod
    def infinite(cls) -> DecisionCost:
        return cls(INFINITY, GraphNode(0, 0))


class _Decision(Protocol):
    def cost(
        self, start: GraphNode, layers: Sequence[GraphLayer]
    ) -> tuple[DecisionCost, Path]: ...


@dataclass(frozen=True)
class GoToLift:
    """Travel to the bottom of a lift and ride it to the top."""

    start: GraphNode
    end: GraphNode

    def cost(
        self, start: GraphNode, layers: Sequence[GraphLayer]
    ) -> tuple[DecisionCost, Path]:
        path = dijkstra(start, self.start, layers)
        return DecisionCost(path.cost() + GraphWeight(1), self.end), path


def decisions(layers: Sequence[GraphLayer]) -> list[GoToLift]:
    """The decisions available on ``layers``: one per lift."""
    result = []
    for layer in layers:
        kind = layer.graph_type()
        if isinstance(kind, LiftType):
            result.append(GoToLift(kind.start, kind.end))
    return result


@dataclass
class DecisionTree:
    """A decision followed by the decisions that could come after it."""

    root: _Decision
    root_end: GraphNode
    children: list[DecisionTree] = field(default_factory=list)

    @classmethod
    def create(
        cls, start: GraphNode, layers: Sequence[GraphLayer]
    ) -> tuple[DecisionTree, DecisionCost, Path]:
        """Search two levels beyond each available decision from ``start``.

        Raises ValueError if there are no decisions to make.
        """
        best: Optional[tuple[DecisionTree, DecisionCost, Path]] = None
        for decision in decisions(layers):
            tree, cost, path = cls.build(start, decision, layers, 2)
            if best is None:
                best = (tree, cost, path)
            elif best[1].cost > cost.cost:
                # The cheaper tree replaces the old one, but the path first found is kept.
                best = (tree, cost, best[2])
        if best is None:
            raise ValueError("no decisions available: there are no lifts")
        return best

    @classmethod
    def build(
        cls,
        start: GraphNode,
        root: _Decision,
        layers: Sequence[GraphLayer],
        recurse_levels: int,
    ) -> tuple[DecisionTree, DecisionCost, Path]:
        """Build the tree under ``root``; recursion stops when ``recurse_levels`` is zero."""
        root_cost, root_path = root.cost(start, layers)
        children: list[DecisionTree] = []
        lowest: Optional[tuple[DecisionCost, Path]] = None
        if recurse_levels > 0:
            for decision in decisions(layers):
                child, child_cost, child_path = cls.build(
                    root_cost.end, decision, layers, recurse_levels - 1
                )
                children.append(child)
                if lowest is None or child_cost.cost < lowest[0].cost:
                    lowest = (child_cost, child_path)
        if lowest is not None:
            child_cost, child_path = lowest
            cost = DecisionCost(child_cost.cost + root_cost.cost, child_cost.end)
            path = root_path.append(child_path)
        else:
            cost, path = root_cost, root_path
        return cls(root, root_cost.end, children), cost, path
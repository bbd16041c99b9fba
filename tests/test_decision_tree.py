import pytest

from summit_surveyor.decision_tree import DecisionCost, DecisionTree, GoToLift, decisions
from summit_surveyor.graph import INFINITY, GraphNode, GraphWeight
from summit_surveyor.lift import add_lift
from summit_surveyor.terrain import Terrain


def _layers(*lifts):
    layers = [Terrain.flat((5, 5)).graph_layer()]
    for bottom, top in lifts:
        add_lift(bottom, top, layers)
    return layers


def test_infinite_cost():
    cost = DecisionCost.infinite()
    assert cost.cost == INFINITY
    assert cost.end == GraphNode(0, 0)


def test_decisions_only_from_lifts():
    layers = _layers(((0, 0), (4, 4)), ((1, 1), (3, 2)))
    assert decisions(layers) == [
        GoToLift(GraphNode(0, 0), GraphNode(4, 4)),
        GoToLift(GraphNode(1, 1), GraphNode(3, 2)),
    ]


def test_decisions_empty_without_lifts():
    assert decisions(_layers()) == []


def test_go_to_lift_cost():
    layers = _layers(((2, 2), (4, 4)))
    lift = GoToLift(GraphNode(2, 2), GraphNode(4, 4))
    cost, path = lift.cost(GraphNode(0, 0), layers)
    assert path[0][0] == GraphNode(0, 0)
    assert path.endpoint() == GraphNode(2, 2)
    assert cost.end == GraphNode(4, 4)
    assert cost.cost == path.cost() + GraphWeight(1)
    assert cost.cost == GraphWeight(5)


def test_build_without_recursion():
    layers = _layers(((2, 2), (4, 4)))
    lift = GoToLift(GraphNode(2, 2), GraphNode(4, 4))
    tree, cost, path = DecisionTree.build(GraphNode(0, 0), lift, layers, 0)
    root_cost, root_path = lift.cost(GraphNode(0, 0), layers)
    assert tree.children == []
    assert tree.root_end == GraphNode(4, 4)
    assert cost == root_cost
    assert path == root_path


def test_build_with_recursion_adds_child_cost():
    layers = _layers(((2, 2), (4, 4)))
    lift = GoToLift(GraphNode(2, 2), GraphNode(4, 4))
    tree, cost, path = DecisionTree.build(GraphNode(0, 0), lift, layers, 1)
    root_cost, root_path = lift.cost(GraphNode(0, 0), layers)
    child_cost, child_path = lift.cost(GraphNode(4, 4), layers)
    assert len(tree.children) == 1
    assert tree.children[0].children == []
    assert cost.cost == root_cost.cost + child_cost.cost
    assert cost.end == GraphNode(4, 4)
    assert len(path) == len(root_path) + len(child_path)


def test_create_matches_build_depth_two():
    layers = _layers(((2, 2), (4, 4)))
    tree, cost, path = DecisionTree.create(GraphNode(0, 0), layers)
    lift = GoToLift(GraphNode(2, 2), GraphNode(4, 4))
    _, expected_cost, expected_path = DecisionTree.build(GraphNode(0, 0), lift, layers, 2)
    assert cost == expected_cost
    assert path == expected_path
    assert tree.root == lift
    assert len(tree.children) == 1
    assert len(tree.children[0].children) == 1


def test_create_chooses_cheaper_tree():
    layers = _layers(((4, 4), (0, 0)), ((0, 1), (4, 4)))
    tree, cost, _ = DecisionTree.create(GraphNode(0, 0), layers)
    costs = [
        DecisionTree.build(GraphNode(0, 0), d, layers, 2)[1].cost for d in decisions(layers)
    ]
    assert cost.cost == min(costs)
    assert tree.root == GoToLift(GraphNode(0, 1), GraphNode(4, 4))


def test_create_without_lifts_raises():
    with pytest.raises(ValueError):
        DecisionTree.create(GraphNode(0, 0), _layers())
import pytest

from uptree.spanning import Edge, kruskal, total_weight
from uptree.structures import DuplicateElementError, ElementNotFoundError

CITIES = ["Raleigh", "Asheville", "Wilmington", "Durham", "Greenville"]

HIGHWAYS = [
    Edge("Raleigh", "Asheville", 5, "h1"),
    Edge("Raleigh", "Wilmington", 10, "h2"),
    Edge("Raleigh", "Durham", 15, "h3"),
    Edge("Raleigh", "Greenville", 20, "h4"),
    Edge("Asheville", "Wilmington", 25, "h5"),
    Edge("Asheville", "Durham", 30, "h6"),
    Edge("Asheville", "Greenville", 35, "h7"),
    Edge("Wilmington", "Durham", 40, "h8"),
    Edge("Wilmington", "Greenville", 45, "h9"),
    Edge("Durham", "Greenville", 50, "h10"),
]


def test_kruskal_picks_cheapest_highways():
    tree = kruskal(CITIES, list(reversed(HIGHWAYS)))
    assert [edge.weight for edge in tree] == [5, 10, 15, 20]
    assert [edge.payload for edge in tree] == ["h1", "h2", "h3", "h4"]
    assert total_weight(tree) == 50


def test_kruskal_reaches_pendant_vertex():
    highways = HIGHWAYS + [Edge("Greenville", "Boone", 55, "h11")]
    tree = kruskal(CITIES + ["Boone"], highways)
    assert [edge.payload for edge in tree] == ["h1", "h2", "h3", "h4", "h11"]


def test_kruskal_returns_forest_for_disconnected_graph():
    edges = [Edge("a", "b", 1), Edge("c", "d", 2), Edge("a", "b", 3)]
    forest = kruskal(["a", "b", "c", "d"], edges)
    assert forest == [Edge("a", "b", 1), Edge("c", "d", 2)]


def test_kruskal_breaks_ties_by_input_order():
    edges = [Edge("a", "b", 1, "first"), Edge("b", "a", 1, "second")]
    assert [edge.payload for edge in kruskal(["a", "b"], edges)] == ["first"]


def test_kruskal_handles_empty_graph():
    assert kruskal([], []) == []
    assert kruskal(["solo"], []) == []


def test_kruskal_rejects_unknown_endpoint():
    with pytest.raises(ElementNotFoundError):
        kruskal(["a", "b"], [Edge("a", "z", 1)])


def test_kruskal_rejects_duplicate_vertices():
    with pytest.raises(DuplicateElementError):
        kruskal(["a", "a"], [])

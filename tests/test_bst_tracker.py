import pytest

from ds_lab.tree.bst_tracker import (
    build_tree,
    generate_bst_inorder_trace,
    generate_bst_insert_trace,
    generate_bst_search_trace,
    tree_height,
)

VALUES = [5, 3, 8, 1, 4]


def compare_steps(trace):
    return [s for s in trace["steps"] if s["title"].startswith("Compare with")]


def test_inorder_yields_sorted_values():
    trace = generate_bst_inorder_trace(VALUES)
    assert trace["steps"][-1]["meta"]["output"] == [1, 3, 4, 5, 8]
    # one step per node plus the summary
    assert len(trace["steps"]) == len(VALUES) + 1
    assert [s["title"] for s in trace["steps"][:-1]] == [
        "Visit 1", "Visit 3", "Visit 4", "Visit 5", "Visit 8",
    ]


def test_inorder_output_accumulates():
    trace = generate_bst_inorder_trace(VALUES)
    outputs = [s["meta"]["output"] for s in trace["steps"][:-1]]
    assert outputs[0] == [1]
    assert outputs[2] == [1, 3, 4]


@pytest.mark.parametrize("values", [
    [9, 2, 7, 7, 1, 12, 3],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
    [2.5, -1, 2.5, 0],
])
def test_inorder_matches_sorted_order(values):
    trace = generate_bst_inorder_trace(values)
    assert trace["steps"][-1]["meta"]["output"] == sorted(values)


def test_inorder_empty_tree():
    trace = generate_bst_inorder_trace([])
    assert len(trace["steps"]) == 1
    assert trace["steps"][0]["meta"]["output"] == []


def test_duplicates_route_right():
    nodes, root = build_tree([5, 5])
    assert nodes[root]["left"] is None
    assert nodes[nodes[root]["right"]]["value"] == 5


def test_insert_narrates_each_comparison():
    trace = generate_bst_insert_trace(VALUES, 6)
    assert [s["title"] for s in trace["steps"]] == [
        "Start at root",
        "Compare with 5",
        "Compare with 8",
        "Create new leaf",
    ]
    assert "6 > 5, go right" in trace["steps"][1]["description"]
    assert "6 < 8, go left" in trace["steps"][2]["description"]
    last = trace["steps"][-1]
    assert "left child of 8" in last["description"]
    assert last["meta"]["path"] == [5, 8]
    assert last["meta"]["depth"] == 2
    assert "(6)" in last["visual"]


def test_insert_duplicate_goes_right():
    trace = generate_bst_insert_trace(VALUES, 5)
    assert "equal values route right" in trace["steps"][1]["description"]
    assert "left child of 8" in trace["steps"][-1]["description"]


def test_insert_into_empty_tree_creates_root():
    trace = generate_bst_insert_trace([], 7)
    assert len(trace["steps"]) == 1
    assert trace["steps"][0]["title"] == "Create root"
    assert trace["steps"][0]["meta"]["values"] == [7]


def test_insert_on_degenerate_chain_visits_every_node():
    chain = [1, 2, 3, 4, 5]
    trace = generate_bst_insert_trace(chain, 6)
    assert len(compare_steps(trace)) == 5
    assert trace["steps"][-1]["meta"]["depth"] == 5
    assert trace["complexity"] == "O(log n) average / O(n) worst"


def test_insert_then_traverse_stays_sorted():
    inserted = generate_bst_insert_trace(VALUES, 2)
    values = inserted["steps"][-1]["meta"]["values"]
    trace = generate_bst_inorder_trace(values)
    assert trace["steps"][-1]["meta"]["output"] == [1, 2, 3, 4, 5, 8]


def test_search_found():
    trace = generate_bst_search_trace(VALUES, 4)
    assert [s["title"] for s in trace["steps"]] == [
        "Compare with 5",
        "Compare with 3",
        "Compare with 4",
        "Value found",
    ]
    assert trace["steps"][-1]["meta"]["found"] is True
    assert trace["steps"][-1]["meta"]["depth"] == 2


def test_search_not_found():
    trace = generate_bst_search_trace(VALUES, 7)
    assert trace["steps"][-1]["title"] == "Value not found"
    assert trace["steps"][-1]["meta"]["path"] == [5, 8]


@pytest.mark.parametrize("target", range(-1, 11))
def test_search_visits_at_most_height_plus_one(target):
    nodes, root = build_tree(VALUES)
    trace = generate_bst_search_trace(VALUES, target)
    assert len(compare_steps(trace)) <= tree_height(nodes, root) + 1
    found = trace["steps"][-1]["title"] == "Value found"
    assert found == (target in VALUES)


def test_search_empty_tree():
    trace = generate_bst_search_trace([], 3)
    assert len(trace["steps"]) == 1
    assert trace["steps"][0]["meta"]["found"] is False


def test_tree_height():
    nodes, root = build_tree(VALUES)
    assert tree_height(nodes, root) == 3
    assert tree_height([], None) == 0


def test_tree_height_of_long_chain():
    nodes, root = build_tree(list(range(5000)))
    assert tree_height(nodes, root) == 5000


def test_search_reports_tree_height():
    found = generate_bst_search_trace(VALUES, 4)["steps"][-1]
    assert found["meta"]["height"] == 3
    missing = generate_bst_search_trace(VALUES, 7)["steps"][-1]
    assert missing["meta"]["height"] == 3
    assert "3 level(s) deep" in missing["description"]
    assert generate_bst_search_trace([], 1)["steps"][-1]["meta"]["height"] == 0


@pytest.mark.parametrize("target,comparisons,found", [(-1, 1, False), (1499, 1500, True), (1500, 1500, False)])
def test_search_on_degenerate_chain(target, comparisons, found):
    chain = list(range(1500))
    trace = generate_bst_search_trace(chain, target)
    assert len(compare_steps(trace)) == comparisons
    last = trace["steps"][-1]
    assert last["meta"]["found"] is found
    assert last["meta"]["height"] == 1500


def test_inorder_on_degenerate_chain():
    chain = list(range(1500, 0, -1))
    trace = generate_bst_inorder_trace(chain)
    assert trace["steps"][-1]["meta"]["output"] == sorted(chain)
    assert len(trace["steps"]) == len(chain) + 1

import json
from pathlib import Path

from ds_lab.renderer import format_value, render_tree
from ds_lab.trace import add_step, assemble_trace

# Tree model: an arena list of {"value", "left", "right"} dicts where children
# are integer handles into the list. Built fresh from the initial values on
# every call, with no rebalancing. Duplicates route right (value >= node -> right).


def _new_node(nodes, value):
    nodes.append({"value": value, "left": None, "right": None})
    return len(nodes) - 1


def _direction(value, node_value):
    return "left" if value < node_value else "right"


def insert_value(nodes, root, value):
    """Plain BST insert; returns (root, new_handle, path_of_visited_handles)."""
    new = _new_node(nodes, value)
    if root is None:
        return new, new, []

    path = []
    current = root
    while True:
        path.append(current)
        side = _direction(value, nodes[current]["value"])
        child = nodes[current][side]
        if child is None:
            nodes[current][side] = new
            return root, new, path
        current = child


def build_tree(values):
    """Insert the values in the given order into an empty tree; returns (nodes, root)."""
    nodes = []
    root = None
    for value in values:
        root, _, _ = insert_value(nodes, root, value)
    return nodes, root


def tree_height(nodes, root):
    """Number of nodes on the longest root-to-leaf path (0 for an empty tree)."""
    height = 0
    stack = [(root, 1)] if root is not None else []
    while stack:
        handle, depth = stack.pop()
        height = max(height, depth)
        for child in (nodes[handle]["left"], nodes[handle]["right"]):
            if child is not None:
                stack.append((child, depth + 1))
    return height


def _fmt_list(values):
    return "[" + ", ".join(format_value(v) for v in values) + "]"


def _path_phrase(nodes, path):
    return " -> ".join(format_value(nodes[h]["value"]) for h in path)


def _comparison(value, node_value):
    v, x = format_value(value), format_value(node_value)
    if value < node_value:
        return f"{v} < {x}, go left."
    if value == node_value:
        return f"{v} = {x}; equal values route right."
    return f"{v} > {x}, go right."


def generate_bst_insert_trace(initial_values, value, styles=None):
    """
    Narrate a standard BST insert: one step per node compared on the way down,
    then a final step attaching the new leaf. Depth reported is the real depth reached.
    """
    nodes, root = build_tree(initial_values)
    values = list(initial_values)
    steps = []
    takeaway = (
        "BST insert follows a single root-to-leaf path: O(log n) when the tree is balanced, "
        "but O(n) when sorted input has degraded it into a chain."
    )

    if root is None:
        root, new, _ = insert_value(nodes, root, value)
        values.append(value)
        add_step(
            steps, "insert", "Create root",
            f"The tree is empty, so {format_value(value)} becomes the root.",
            render_tree(nodes, root, highlight={new}, styles=styles),
            {"values": list(values), "path": [], "depth": 0},
        )
        return assemble_trace("bst", "insert", takeaway, steps)

    add_step(
        steps, "insert", "Start at root",
        f"Begin at the root ({format_value(nodes[root]['value'])}). At each node, a smaller value goes left; "
        "an equal or larger value goes right.",
        render_tree(nodes, root, highlight={root}, styles=styles),
        {"values": list(values), "path": []},
    )

    # =================================================================
    # Walk down, one step per comparison
    # =================================================================
    path = []
    current = root
    while True:
        path.append(current)
        node = nodes[current]
        side = _direction(value, node["value"])
        child = node[side]
        if child is None:
            follow = f" The {side} child is empty, so the new value goes there."
        else:
            follow = f" Next node: {format_value(nodes[child]['value'])}."
        add_step(
            steps, "insert", f"Compare with {format_value(node['value'])}",
            _comparison(value, node["value"]) + follow,
            render_tree(nodes, root, highlight={current}, styles=styles),
            {"values": list(values), "path": [nodes[h]["value"] for h in path], "direction": side},
        )
        if child is None:
            break
        current = child

    new = _new_node(nodes, value)
    nodes[current][side] = new
    values.append(value)
    add_step(
        steps, "insert", "Create new leaf",
        f"Attach {format_value(value)} as the {side} child of {format_value(nodes[current]['value'])} "
        f"at depth {len(path)}. Path: {_path_phrase(nodes, path)}.",
        render_tree(nodes, root, highlight={new}, styles=styles),
        {"values": list(values), "path": [nodes[h]["value"] for h in path], "depth": len(path)},
    )
    return assemble_trace("bst", "insert", takeaway, steps)


def generate_bst_search_trace(initial_values, value, styles=None):
    """Follow the insert comparisons until a match or a missing child."""
    nodes, root = build_tree(initial_values)
    height = tree_height(nodes, root)
    values = list(initial_values)
    steps = []
    takeaway = (
        "BST search discards one subtree per comparison, so it visits at most height + 1 nodes: "
        "O(log n) on a balanced tree, O(n) on a chain."
    )

    if root is None:
        add_step(
            steps, "search", "Value not found",
            f"The tree is empty, so {format_value(value)} cannot be in it.",
            render_tree(nodes, root, styles=styles),
            {"values": [], "path": [], "height": 0, "found": False},
        )
        return assemble_trace("bst", "search", takeaway, steps)

    path = []
    current = root
    while current is not None:
        path.append(current)
        node = nodes[current]
        path_values = [nodes[h]["value"] for h in path]
        if value == node["value"]:
            add_step(
                steps, "search", f"Compare with {format_value(node['value'])}",
                f"{format_value(value)} = {format_value(node['value'])}: match.",
                render_tree(nodes, root, highlight={current}, styles=styles),
                {"values": list(values), "path": path_values},
            )
            add_step(
                steps, "search", "Value found",
                f"Found {format_value(value)} at depth {len(path) - 1} after {len(path)} comparison(s). "
                f"Path: {_path_phrase(nodes, path)}.",
                render_tree(nodes, root, highlight={current}, styles=styles),
                {"values": list(values), "path": path_values, "depth": len(path) - 1,
                 "height": height, "found": True},
            )
            return assemble_trace("bst", "search", takeaway, steps)

        side = _direction(value, node["value"])
        child = node[side]
        if child is None:
            follow = f" The {side} child is empty."
        else:
            follow = f" Next node: {format_value(nodes[child]['value'])}."
        add_step(
            steps, "search", f"Compare with {format_value(node['value'])}",
            _comparison(value, node["value"]) + follow,
            render_tree(nodes, root, highlight={current}, styles=styles),
            {"values": list(values), "path": path_values, "direction": side},
        )
        current = child

    add_step(
        steps, "search", "Value not found",
        f"Reached an empty child after {len(path)} comparison(s); {format_value(value)} is not in the tree. "
        f"Path: {_path_phrase(nodes, path)}."
        f" The tree is {height} level(s) deep, so no search takes more comparisons.",
        render_tree(nodes, root, styles=styles),
        {"values": list(values), "path": [nodes[h]["value"] for h in path], "height": height, "found": False},
    )
    return assemble_trace("bst", "search", takeaway, steps)


def generate_bst_inorder_trace(initial_values, styles=None):
    """One step per visited node in left-node-right order; the output ends up sorted."""
    nodes, root = build_tree(initial_values)
    values = list(initial_values)
    steps = []
    takeaway = (
        "In-order traversal touches every node once (O(n)) and always emits a BST's values in sorted order; "
        "the explicit stack grows to the tree height."
    )

    if root is None:
        add_step(
            steps, "inorder", "Empty tree",
            "The tree is empty, so the in-order traversal produces no output.",
            render_tree(nodes, root, styles=styles),
            {"values": [], "output": []},
        )
        return assemble_trace("bst", "inorder", takeaway, steps)

    output = []
    stack = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = nodes[current]["left"]
        current = stack.pop()
        node_value = nodes[current]["value"]
        output.append(node_value)
        add_step(
            steps, "inorder", f"Visit {format_value(node_value)}",
            f"The left subtree of {format_value(node_value)} is finished, so output it. "
            f"Output so far: {_fmt_list(output)}.",
            render_tree(nodes, root, highlight={current}, styles=styles),
            {"values": list(values), "output": list(output)},
        )
        current = nodes[current]["right"]

    add_step(
        steps, "inorder", "Traversal complete",
        f"Visited all {len(output)} node(s). In-order output: {_fmt_list(output)}, which is sorted.",
        render_tree(nodes, root, styles=styles),
        {"values": list(values), "output": list(output)},
    )
    return assemble_trace("bst", "inorder", takeaway, steps)


if __name__ == '__main__':
    my_values = [8, 3, 10, 1, 6, 14]
    output_dir = Path("traces/bst")
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / "bst_insert_trace.json"

    print(f"Generating BST insert trace for {my_values} (value 7)...")
    trace = generate_bst_insert_trace(my_values, 7)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(trace, f, indent=2, ensure_ascii=False)

    print(f"Trace saved to: {output_path}")

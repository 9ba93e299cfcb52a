# renderer.py
"""
ASCII renderers for the four structures.

Each tracker hands its current state to one of these functions and stores the
returned text as the step's ``visual``. Glyphs come from DEFAULT_STYLES, or a
merged copy of it when the caller supplied overrides.
"""
from ds_lab.default_styles import DEFAULT_STYLES
from ds_lab.registry import MAX_ELEMENTS

# Bounds for tree drawings; any tree within MAX_ELEMENTS nodes is drawn in full.
MAX_TREE_DEPTH = MAX_ELEMENTS
MAX_TREE_LINES = 2 * MAX_ELEMENTS


def format_value(value):
    """Render a number the way a learner typed it: 13.0 -> '13', 2.5 -> '2.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _empty(styles):
    return styles["emptyStyles"]["glyph"]


def render_array(values, highlight=(), pointer=None, styles=None):
    """
    Draw an array as a row of cells with an index row underneath.
    - values: cell contents; None draws an empty slot
    - highlight: indices drawn with the highlight brackets
    - pointer: index (0..len) marked with a caret below the index row
    """
    styles = styles or DEFAULT_STYLES
    array_styles = styles["arrayStyles"]
    if not values:
        return _empty(styles)

    # None marks a vacated slot while elements are shifting
    labels = ["" if v is None else format_value(v) for v in values]
    width = max(max(len(label) for label in labels), len(str(len(values) - 1)))
    cell_width = width + 2

    cells = []
    for i, label in enumerate(labels):
        if i in highlight:
            left, right = array_styles["highlight_open"], array_styles["highlight_close"]
        else:
            left, right = array_styles["cell_open"], array_styles["cell_close"]
        cells.append(f"{left}{label:^{width}}{right}")
    indices = [f" {str(i):^{width}} " for i in range(len(values))]

    val_label, idx_label = array_styles["value_label"], array_styles["index_label"]
    gutter = max(len(val_label), len(idx_label)) + 1
    lines = [
        f"{val_label:<{gutter}}" + "".join(cells),
        f"{idx_label:<{gutter}}" + "".join(indices),
    ]
    if pointer is not None and 0 <= pointer <= len(values):
        offset = gutter + pointer * cell_width + 1 + (width - 1) // 2
        lines.append(" " * offset + array_styles["pointer"])
    return "\n".join(line.rstrip() for line in lines)


def render_stack(values, styles=None):
    """Draw a stack vertically, top of the stack first."""
    styles = styles or DEFAULT_STYLES
    stack_styles = styles["stackStyles"]
    if not values:
        return _empty(styles)

    labels = [format_value(v) for v in values]
    width = max(len(label) for label in labels)
    wall = stack_styles["wall"]
    lines = []
    for position, label in enumerate(reversed(labels)):
        row = f"{wall} {label:^{width}} {wall}"
        if position == 0:
            row += f" {stack_styles['top_marker']}"
        lines.append(row)
    floor = stack_styles["floor"]
    lines.append(floor + "-" * (width + 2) + floor)
    return "\n".join(lines)


def render_queue(values, styles=None):
    """Draw a queue left to right, head on the left and tail on the right."""
    styles = styles or DEFAULT_STYLES
    queue_styles = styles["queueStyles"]
    if not values:
        return _empty(styles)

    body = queue_styles["separator"].join(format_value(v) for v in values)
    return f"{queue_styles['head_marker']} -> [ {body} ] <- {queue_styles['tail_marker']}"


def render_tree(nodes, root, highlight=(), styles=None):
    """
    Draw a binary tree sideways: right subtree above, left subtree below.
    - nodes: arena of {"value", "left", "right"} dicts, children are handles
    - root: handle of the root node, or None for an empty tree
    - highlight: handles drawn with the highlight brackets
    Subtrees below MAX_TREE_DEPTH collapse to one line, and the drawing stops
    after MAX_TREE_LINES lines, so oversized or chain-shaped trees stay bounded.
    """
    styles = styles or DEFAULT_STYLES
    tree_styles = styles["treeStyles"]
    if root is None:
        return _empty(styles)

    def label(handle):
        text = format_value(nodes[handle]["value"])
        if handle in highlight:
            return f"{tree_styles['highlight_open']}{text}{tree_styles['highlight_close']}"
        return text

    def connector(is_left):
        return tree_styles["branch_down"] if is_left else tree_styles["branch_up"]

    lines = []
    # Entries: (phase, handle, prefix, is_left, depth); "visit" expands, "emit" draws
    stack = [("visit", root, "", True, 0)]
    while stack:
        if len(lines) >= MAX_TREE_LINES:
            lines.append(tree_styles["truncated"])
            break
        phase, handle, prefix, is_left, depth = stack.pop()
        if phase == "emit":
            lines.append(prefix + connector(is_left) + label(handle))
            continue
        if depth >= MAX_TREE_DEPTH:
            lines.append(prefix + connector(is_left) + tree_styles["collapsed"])
            continue

        node = nodes[handle]
        # Pushed in reverse so the right subtree is drawn first
        if node["left"] is not None:
            left_prefix = prefix + (tree_styles["gap"] if is_left else tree_styles["trunk"])
            stack.append(("visit", node["left"], left_prefix, True, depth + 1))
        stack.append(("emit", handle, prefix, is_left, depth))
        if node["right"] is not None:
            right_prefix = prefix + (tree_styles["trunk"] if is_left else tree_styles["gap"])
            stack.append(("visit", node["right"], right_prefix, False, depth + 1))

    return "\n".join(lines)

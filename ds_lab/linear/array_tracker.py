import json
from pathlib import Path

from ds_lab.renderer import format_value, render_array
from ds_lab.trace import add_step, assemble_trace


def _listing(values):
    return ", ".join(format_value(v) for v in values)


def generate_array_insert_trace(initial_values, index, value, styles=None):
    """
    Narrate inserting `value` at `index`: locate the slot, shift the tail right, write the value.
    The index is clamped to [0, len]; a clamped index is called out in the first step.
    """
    arr = list(initial_values)
    n = len(arr)
    requested = int(index)
    target = max(0, min(requested, n))
    steps = []

    # =================================================================
    # 1. Locate the insertion slot
    # =================================================================
    description = (
        f"The array holds {n} element(s). Value {format_value(value)} "
        f"will be written at index {target}."
    )
    if target != requested:
        description += f" Index {requested} is outside 0..{n}, so it is clamped to {target}."
    add_step(
        steps, "insert", "Locate insertion index", description,
        render_array(arr, highlight=range(target, n), pointer=target, styles=styles),
        {"values": list(arr), "index": target, "requested_index": requested},
    )

    # =================================================================
    # 2. Shift the tail one slot to the right
    # =================================================================
    moved = arr[target:]
    opened = arr[:target] + [None] + moved
    if moved:
        description = (
            f"Elements at positions {target}..{n - 1} ({_listing(moved)}) each move one slot right, "
            f"starting from the end so nothing is overwritten. That is {len(moved)} move(s)."
        )
    else:
        description = f"Index {target} is the end of the array, so no elements need to move."
    add_step(
        steps, "insert", "Shift elements right", description,
        render_array(opened, highlight=range(target + 1, n + 1), pointer=target, styles=styles),
        {"values": opened, "index": target, "moved": list(moved)},
    )

    # =================================================================
    # 3. Write the value
    # =================================================================
    arr.insert(target, value)
    add_step(
        steps, "insert", "Write value",
        f"Write {format_value(value)} into the free slot at index {target}.",
        render_array(arr, highlight={target}, pointer=target, styles=styles),
        {"values": list(arr), "index": target},
    )

    add_step(
        steps, "insert", "Final array",
        f"The array now holds {len(arr)} elements: {_listing(arr)}.",
        render_array(arr, styles=styles),
        {"values": list(arr)},
    )

    takeaway = (
        "Inserting into an array costs O(n) because every element after the index shifts; "
        "appending at the end skips the shift."
    )
    return assemble_trace("array", "insert", takeaway, steps)


def generate_array_delete_trace(initial_values, index, styles=None):
    """Narrate removing the element at `index` and closing the gap with a left shift."""
    arr = list(initial_values)
    n = len(arr)
    requested = int(index)
    steps = []
    takeaway = (
        "Deleting from an array costs O(n) because the elements after the gap shift left; "
        "removing the last element is the only cheap case."
    )

    if n == 0:
        add_step(
            steps, "delete", "Empty array",
            f"The array is empty, so there is nothing to delete at index {requested}. "
            "The operation leaves the array unchanged.",
            render_array(arr, styles=styles),
            {"values": [], "index": requested},
        )
        return assemble_trace("array", "delete", takeaway, steps)

    target = max(0, min(requested, n - 1))
    removed = arr[target]

    # =================================================================
    # 1. Select the element to remove
    # =================================================================
    description = f"Element {format_value(removed)} at index {target} will be removed."
    if target != requested:
        description += f" Index {requested} is outside 0..{n - 1}, so it is clamped to {target}."
    add_step(
        steps, "delete", "Select element to remove", description,
        render_array(arr, highlight={target}, pointer=target, styles=styles),
        {"values": list(arr), "index": target, "requested_index": requested, "removed": removed},
    )

    # =================================================================
    # 2. Shift the tail one slot to the left
    # =================================================================
    tail = arr[target + 1:]
    del arr[target]
    if tail:
        description = (
            f"Elements at positions {target + 1}..{n - 1} ({_listing(tail)}) each move one slot left "
            f"to close the gap. That is {len(tail)} move(s)."
        )
    else:
        description = f"Index {target} was the last slot, so no elements need to move."
    add_step(
        steps, "delete", "Shift elements left", description,
        render_array(arr, highlight=range(target, n - 1), styles=styles),
        {"values": list(arr), "index": target, "moved": list(tail)},
    )

    add_step(
        steps, "delete", "Final array",
        f"The array now holds {len(arr)} element(s)"
        + (f": {_listing(arr)}." if arr else " and is empty."),
        render_array(arr, styles=styles),
        {"values": list(arr), "removed": removed},
    )
    return assemble_trace("array", "delete", takeaway, steps)


def generate_array_access_trace(initial_values, index, styles=None):
    """Single-step lookup; an index outside the array is narrated as out of bounds."""
    arr = list(initial_values)
    n = len(arr)
    i = int(index)
    steps = []

    if 0 <= i < n:
        add_step(
            steps, "access", f"Read index {i}",
            f"arr[{i}] = {format_value(arr[i])}. The slot address is computed directly from the index, "
            "so no other element is touched.",
            render_array(arr, highlight={i}, pointer=i, styles=styles),
            {"values": list(arr), "index": i, "result": arr[i]},
        )
    else:
        valid = f"0..{n - 1}" if n else "empty"
        add_step(
            steps, "access", "Index out of bounds",
            f"Index {i} is out of bounds: the valid range is {valid} for an array of {n} element(s). "
            "No value is read.",
            render_array(arr, styles=styles),
            {"values": list(arr), "index": i, "result": None},
        )

    takeaway = "Array access is O(1): the index alone locates the slot, regardless of array size."
    return assemble_trace("array", "access", takeaway, steps)


def generate_array_search_trace(initial_values, value, styles=None):
    """One step per probed index, then a final found / not found step."""
    arr = list(initial_values)
    steps = []
    found_at = None

    for i, item in enumerate(arr):
        match = item == value
        verdict = "match" if match else "no match, move on"
        add_step(
            steps, "search", f"Probe index {i}",
            f"Compare arr[{i}] = {format_value(item)} with {format_value(value)}: {verdict}.",
            render_array(arr, highlight={i}, pointer=i, styles=styles),
            {"values": list(arr), "index": i, "match": match},
        )
        if match:
            found_at = i
            break

    if found_at is not None:
        add_step(
            steps, "search", "Value found",
            f"Found {format_value(value)} at index {found_at} after {found_at + 1} comparison(s).",
            render_array(arr, highlight={found_at}, styles=styles),
            {"values": list(arr), "result": found_at},
        )
    else:
        if arr:
            description = f"Checked all {len(arr)} element(s); {format_value(value)} is not in the array."
        else:
            description = f"The array is empty, so {format_value(value)} cannot be in it."
        add_step(
            steps, "search", "Value not found", description,
            render_array(arr, styles=styles),
            {"values": list(arr), "result": None},
        )

    takeaway = (
        "Linear search is O(n): an unsorted array gives no hint where a value lives, "
        "so the worst case probes every slot."
    )
    return assemble_trace("array", "search", takeaway, steps)


if __name__ == '__main__':
    my_array = [3, 7, 12, 18, 21]
    output_dir = Path("traces/array")
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / "array_insert_trace.json"

    print(f"Generating array insert trace for {my_array} (index 2, value 13)...")
    trace = generate_array_insert_trace(my_array, 2, 13)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(trace, f, indent=2, ensure_ascii=False)

    print(f"Trace saved to: {output_path}")

# dispatcher.py
import argparse
import json
import logging
from pathlib import Path

from ds_lab.default_styles import DEFAULT_STYLES
from ds_lab.errors import UnknownOperation, UnknownStructure
from ds_lab.registry import get_structure
from ds_lab.style_merger import merge_styles
from ds_lab.validate import validate_trace

# --- 1. Import the tracker functions for every structure ---
from ds_lab.linear.array_tracker import (
    generate_array_access_trace,
    generate_array_delete_trace,
    generate_array_insert_trace,
    generate_array_search_trace,
)
from ds_lab.linear.stack_tracker import (
    generate_stack_peek_trace,
    generate_stack_pop_trace,
    generate_stack_push_trace,
)
from ds_lab.linear.queue_tracker import (
    generate_queue_dequeue_trace,
    generate_queue_enqueue_trace,
    generate_queue_peek_trace,
)
from ds_lab.tree.bst_tracker import (
    generate_bst_inorder_trace,
    generate_bst_insert_trace,
    generate_bst_search_trace,
)

logger = logging.getLogger(__name__)

# --- 2. Build the dispatch table ---
# Structure id -> operation id -> tracker function
STRUCTURE_DISPATCH_TABLE = {
    "array": {
        "insert": generate_array_insert_trace,
        "delete": generate_array_delete_trace,
        "access": generate_array_access_trace,
        "search": generate_array_search_trace,
    },
    "stack": {
        "push": generate_stack_push_trace,
        "pop": generate_stack_pop_trace,
        "peek": generate_stack_peek_trace,
    },
    "queue": {
        "enqueue": generate_queue_enqueue_trace,
        "dequeue": generate_queue_dequeue_trace,
        "peek": generate_queue_peek_trace,
    },
    "bst": {
        "insert": generate_bst_insert_trace,
        "search": generate_bst_search_trace,
        "inorder": generate_bst_inorder_trace,
    },
}

# Pull the declared numeric fields out of params, in tracker argument order.
# Missing fields fall back to 0.
PARAM_EXTRACTORS = {
    ("array", "insert"): lambda p: (p.get("index", 0), p.get("value", 0)),
    ("array", "delete"): lambda p: (p.get("index", 0),),
    ("array", "access"): lambda p: (p.get("index", 0),),
    ("array", "search"): lambda p: (p.get("value", 0),),
    ("stack", "push"): lambda p: (p.get("value", 0),),
    ("stack", "pop"): lambda p: (),
    ("stack", "peek"): lambda p: (),
    ("queue", "enqueue"): lambda p: (p.get("value", 0),),
    ("queue", "dequeue"): lambda p: (),
    ("queue", "peek"): lambda p: (),
    ("bst", "insert"): lambda p: (p.get("value", 0),),
    ("bst", "search"): lambda p: (p.get("value", 0),),
    ("bst", "inorder"): lambda p: (),
}


def resolve_tracker(structure_id, operation_id):
    """Find the tracker for a structure/operation pair, raising on ids the registry does not know."""
    structure = get_structure(structure_id)
    if structure is None or structure_id not in STRUCTURE_DISPATCH_TABLE:
        logger.warning("Structure '%s' not found in registry.", structure_id)
        raise UnknownStructure(structure_id)

    if structure.operation(operation_id) is None or operation_id not in STRUCTURE_DISPATCH_TABLE[structure_id]:
        logger.warning("Operation '%s' not declared for structure '%s'.", operation_id, structure_id)
        raise UnknownOperation(structure_id, operation_id)

    return STRUCTURE_DISPATCH_TABLE[structure_id][operation_id]


def simulate(structure_id, operation_id, initial_values, params=None, style_overrides=None):
    """
    Main entry point. Routes the request to the matching tracker and returns the trace:
    {"structure", "operation", "complexity", "space", "takeaway", "steps"}.
    Numeric ranges are not checked here; the trackers narrate out-of-range input.
    """
    tracker_function = resolve_tracker(structure_id, operation_id)
    params = params or {}
    styles = merge_styles(DEFAULT_STYLES, style_overrides)

    args = PARAM_EXTRACTORS[(structure_id, operation_id)](params)
    logger.info("Dispatching %s.%s with %d initial value(s), args=%s",
                structure_id, operation_id, len(initial_values), args)

    trace = tracker_function(list(initial_values), *args, styles=styles)
    result = {"structure": structure_id, "operation": operation_id, **trace}
    return validate_trace(result)


def dispatch_intent(intent_json):
    """Run a request expressed as an intent dict, the format the command line reads."""
    return simulate(
        intent_json.get("structure_id"),
        intent_json.get("operation_id"),
        intent_json.get("initial_values", []),
        intent_json.get("params", {}),
        intent_json.get("style_overrides"),
    )


# --- Usage example ---
if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    parser = argparse.ArgumentParser(description='Dispatch a simulation request from intent JSON')
    parser.add_argument('intent_file', nargs='?', help='Path to intent JSON file')
    parser.add_argument('--output', default=str(Path(__file__).parent / "dispatch_output"),
                        help='Directory for the generated trace')
    args = parser.parse_args()
    if args.intent_file:
        with open(args.intent_file, 'r', encoding='utf-8') as f:
            sample_intent = json.load(f)
    else:
        sample_intent = {
            "structure_id": "bst",
            "operation_id": "insert",
            "initial_values": [5, 3, 8, 1, 4],
            "params": {"value": 6},
        }

    final_trace = dispatch_intent(sample_intent)

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{sample_intent['structure_id']}_{sample_intent['operation_id']}_trace.json"
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(final_trace, f, indent=2, ensure_ascii=False)

    print(f"Dispatch successful! Trace saved to: {output_path}")

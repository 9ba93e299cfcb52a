# trace.py
"""Helpers shared by the trackers for building steps and the final result object."""
from ds_lab.registry import get_structure


def add_step(steps, prefix, title, description, visual, meta=None):
    """Append a step; ids are '<prefix>-<n>' so they stay unique within one trace."""
    step = {
        "id": f"{prefix}-{len(steps) + 1}",
        "title": title,
        "description": description,
        "visual": visual,
        "meta": meta or {},
    }
    steps.append(step)
    return step


def assemble_trace(structure_id, operation_id, takeaway, steps):
    operation = get_structure(structure_id).operation(operation_id)
    return {
        "complexity": operation.complexity,
        "space": operation.space,
        "takeaway": takeaway,
        "steps": steps,
    }

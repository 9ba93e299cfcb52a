"""DS Lab: step-by-step narrated traces of array, stack, queue and BST operations."""
from ds_lab.dispatcher import simulate
from ds_lab.errors import SimulationError, TraceValidationError, UnknownOperation, UnknownStructure
from ds_lab.registry import get_structure, list_structures

__all__ = [
    "simulate",
    "list_structures",
    "get_structure",
    "SimulationError",
    "UnknownStructure",
    "UnknownOperation",
    "TraceValidationError",
]

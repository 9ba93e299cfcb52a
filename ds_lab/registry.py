# registry.py
"""
Static catalog of the structures DS Lab can simulate.

Everything here is built once at import time and never mutated afterwards:
the playground reads it to build its forms, and the dispatcher reads it to
decide which operations exist.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

# Largest structure the playground will draw; enforced by the UI, not the trackers.
MAX_ELEMENTS = 24

BST_COMPLEXITY = "O(log n) average / O(n) worst"


@dataclass(frozen=True)
class FieldDefinition:
    id: str
    label: str
    min: Optional[float] = None
    max: Optional[float] = None
    placeholder: Optional[str] = None


@dataclass(frozen=True)
class OperationDefinition:
    id: str
    label: str
    complexity: str
    space: str
    summary: str
    fields: Tuple[FieldDefinition, ...] = field(default_factory=tuple)

    @property
    def field_ids(self):
        return tuple(f.id for f in self.fields)


@dataclass(frozen=True)
class StructureDefinition:
    id: str
    name: str
    description: str
    default_initial_values: Tuple[float, ...]
    operations: Tuple[OperationDefinition, ...]

    def operation(self, operation_id):
        """Return the operation with this id, or None when the structure does not declare it."""
        for operation in self.operations:
            if operation.id == operation_id:
                return operation
        return None


# =================================================================
# Shared field definitions
# =================================================================

INDEX_FIELD = FieldDefinition("index", "Index", min=0, placeholder="e.g. 2")
VALUE_FIELD = FieldDefinition("value", "Value", placeholder="e.g. 13")


# =================================================================
# Catalog
# =================================================================

STRUCTURES = (
    StructureDefinition(
        id="array",
        name="Array",
        description="Contiguous block of memory with constant-time indexing and costly middle edits.",
        default_initial_values=(3, 7, 12, 18, 21),
        operations=(
            OperationDefinition(
                id="insert",
                label="Insert at index",
                complexity="O(n)",
                space="O(1)",
                summary="Shift every element from the index onward one slot right, then write the value.",
                fields=(INDEX_FIELD, VALUE_FIELD),
            ),
            OperationDefinition(
                id="delete",
                label="Delete at index",
                complexity="O(n)",
                space="O(1)",
                summary="Remove the element and shift the tail one slot left to close the gap.",
                fields=(INDEX_FIELD,),
            ),
            OperationDefinition(
                id="access",
                label="Access by index",
                complexity="O(1)",
                space="O(1)",
                summary="Jump straight to the slot: base address plus index times element size.",
                fields=(INDEX_FIELD,),
            ),
            OperationDefinition(
                id="search",
                label="Linear search",
                complexity="O(n)",
                space="O(1)",
                summary="Probe each slot from the left until the value turns up or the array runs out.",
                fields=(VALUE_FIELD,),
            ),
        ),
    ),
    StructureDefinition(
        id="stack",
        name="Stack",
        description="Last-in, first-out pile where every operation happens at the top.",
        default_initial_values=(2, 5, 9),
        operations=(
            OperationDefinition(
                id="push",
                label="Push",
                complexity="O(1)",
                space="O(1)",
                summary="Place a value on top of the stack.",
                fields=(VALUE_FIELD,),
            ),
            OperationDefinition(
                id="pop",
                label="Pop",
                complexity="O(1)",
                space="O(1)",
                summary="Remove and return the value on top of the stack.",
            ),
            OperationDefinition(
                id="peek",
                label="Peek",
                complexity="O(1)",
                space="O(1)",
                summary="Read the top value without removing it.",
            ),
        ),
    ),
    StructureDefinition(
        id="queue",
        name="Queue",
        description="First-in, first-out line: values join at the tail and leave from the head.",
        default_initial_values=(4, 11, 6),
        operations=(
            OperationDefinition(
                id="enqueue",
                label="Enqueue",
                complexity="O(1)",
                space="O(1)",
                summary="Append a value at the tail of the queue.",
                fields=(VALUE_FIELD,),
            ),
            OperationDefinition(
                id="dequeue",
                label="Dequeue",
                complexity="O(n)",
                space="O(1)",
                summary="Remove the head; an array-backed queue then shifts everything toward index 0.",
            ),
            OperationDefinition(
                id="peek",
                label="Peek",
                complexity="O(1)",
                space="O(1)",
                summary="Read the head value without removing it.",
            ),
        ),
    ),
    StructureDefinition(
        id="bst",
        name="Binary Search Tree",
        description="Ordered binary tree: smaller values live to the left, equal or larger to the right.",
        default_initial_values=(8, 3, 10, 1, 6, 14),
        operations=(
            OperationDefinition(
                id="insert",
                label="Insert",
                complexity=BST_COMPLEXITY,
                space="O(1)",
                summary="Walk down comparing at each node until an empty child slot takes the value.",
                fields=(VALUE_FIELD,),
            ),
            OperationDefinition(
                id="search",
                label="Search",
                complexity=BST_COMPLEXITY,
                space="O(1)",
                summary="Follow the same comparisons as insert, stopping at a match or a missing child.",
                fields=(VALUE_FIELD,),
            ),
            OperationDefinition(
                id="inorder",
                label="In-order traversal",
                complexity="O(n)",
                space="O(h)",
                summary="Visit left subtree, node, right subtree: the values come out sorted.",
            ),
        ),
    ),
)

_STRUCTURES_BY_ID = {structure.id: structure for structure in STRUCTURES}


def list_structures():
    """Ordered catalog of every supported structure."""
    return STRUCTURES


def get_structure(structure_id):
    """Look up a structure by id; unknown ids give None rather than a default."""
    return _STRUCTURES_BY_ID.get(structure_id)


# =================================================================
# Playground reference data
# =================================================================

PRESETS = (
    {"id": "defaults", "label": "Reset defaults", "values": None},
    {"id": "sorted", "label": "Sorted numbers", "values": (1, 3, 5, 7, 9)},
    {"id": "small", "label": "Small set", "values": (9, 4, 6)},
)

CHEAT_SHEET = (
    {"label": "Array insert / delete (middle)", "time": "O(n)", "space": "O(1)"},
    {"label": "Stack push / pop", "time": "O(1)", "space": "O(1)"},
    {"label": "Queue enqueue", "time": "O(1)", "space": "O(1)"},
    {"label": "Queue dequeue (array)", "time": "O(n)", "space": "O(1)"},
    {"label": "BST insert (average)", "time": "O(log n)", "space": "O(1)"},
)


def preset_values(preset, structure):
    """Starting values for a preset; the defaults preset falls back to the structure's own."""
    if preset["values"] is None:
        return list(structure.default_initial_values)
    return list(preset["values"])

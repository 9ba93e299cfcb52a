import dataclasses

import pytest

from ds_lab.registry import (
    CHEAT_SHEET,
    MAX_ELEMENTS,
    PRESETS,
    get_structure,
    list_structures,
    preset_values,
)


def test_structures_are_listed_in_catalog_order():
    assert [s.id for s in list_structures()] == ["array", "stack", "queue", "bst"]


def test_every_structure_declares_operations_with_unique_ids():
    for structure in list_structures():
        assert structure.operations
        ids = [op.id for op in structure.operations]
        assert len(ids) == len(set(ids))


def test_field_ids_are_unique_within_each_operation():
    for structure in list_structures():
        for operation in structure.operations:
            assert len(operation.field_ids) == len(set(operation.field_ids))


def test_lookup_by_id():
    assert get_structure("queue").name == "Queue"
    assert get_structure("bst").operation("inorder").complexity == "O(n)"


def test_unknown_ids_are_not_found():
    assert get_structure("heap") is None
    assert get_structure("array").operation("pop") is None


def test_definitions_are_immutable():
    structure = get_structure("array")
    with pytest.raises(dataclasses.FrozenInstanceError):
        structure.name = "Vector"
    with pytest.raises(dataclasses.FrozenInstanceError):
        structure.operations[0].complexity = "O(1)"


def test_complexity_labels():
    assert get_structure("array").operation("insert").complexity == "O(n)"
    assert get_structure("array").operation("access").complexity == "O(1)"
    assert get_structure("queue").operation("dequeue").complexity == "O(n)"
    assert get_structure("bst").operation("insert").complexity == "O(log n) average / O(n) worst"
    for operation in get_structure("stack").operations:
        assert operation.complexity == "O(1)"
        assert operation.space == "O(1)"


def test_index_fields_have_a_lower_bound():
    array = get_structure("array")
    for operation in array.operations:
        for field in operation.fields:
            if field.id == "index":
                assert field.min == 0


def test_presets_and_cheat_sheet():
    array = get_structure("array")
    by_id = {p["id"]: p for p in PRESETS}
    assert preset_values(by_id["defaults"], array) == list(array.default_initial_values)
    assert preset_values(by_id["sorted"], array) == [1, 3, 5, 7, 9]
    assert preset_values(by_id["small"], array) == [9, 4, 6]
    assert {"label": "Queue dequeue (array)", "time": "O(n)", "space": "O(1)"} in CHEAT_SHEET
    assert MAX_ELEMENTS == 24

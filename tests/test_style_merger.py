from ds_lab.default_styles import DEFAULT_STYLES
from ds_lab.style_merger import merge_styles


def test_merge_overrides_nested_keys_only():
    merged = merge_styles(DEFAULT_STYLES, {"arrayStyles": {"pointer": "*"}})
    assert merged["arrayStyles"]["pointer"] == "*"
    assert merged["arrayStyles"]["cell_open"] == DEFAULT_STYLES["arrayStyles"]["cell_open"]


def test_merge_does_not_mutate_defaults():
    merge_styles(DEFAULT_STYLES, {"stackStyles": {"top_marker": "TOP"}})
    assert DEFAULT_STYLES["stackStyles"]["top_marker"] == "<- top"


def test_merge_keeps_unknown_keys():
    merged = merge_styles(DEFAULT_STYLES, {"extra": {"a": 1}})
    assert merged["extra"] == {"a": 1}


def test_no_overrides_returns_copy():
    merged = merge_styles(DEFAULT_STYLES, None)
    assert merged == DEFAULT_STYLES
    assert merged is not DEFAULT_STYLES

# style_merger.py
import copy


def merge_styles(default_styles, overrides):
    """
    Deep-merge user style overrides over the default style library.
    The defaults are never mutated; unknown keys from the overrides are kept.
    """
    merged = copy.deepcopy(default_styles)
    if not overrides:
        return merged

    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_styles(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged

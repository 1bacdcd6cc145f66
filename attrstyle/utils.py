# utils.py

from typing import Any, Callable, Dict, Hashable, Mapping, Tuple

def points(value: float) -> float:
    """Widen a numeric value to the float precision used by geometry fields."""
    return float(value)

def map_items(
    mapping: Mapping[Any, Any],
    transform: Callable[[Any, Any], Tuple[Hashable, Any]]
) -> Dict[Hashable, Any]:
    """
    Rewrite a mapping's keys and values pairwise into a new dict.

    Args:
        mapping: Source mapping, left untouched
        transform: Called with (key, value), returns the new (key, value)

    Returns:
        New dict built from the transformed pairs
    """
    result = {}
    for key, value in mapping.items():
        new_key, new_value = transform(key, value)
        result[new_key] = new_value
    return result

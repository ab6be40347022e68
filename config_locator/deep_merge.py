"""Logic for deep merging settings dictionaries."""

from typing import Any

# Lists under these keys are merged additively instead of replaced.
ADDITIVE_KEYS = frozenset({"roots"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, EXCEPT for additive keys.
    - 'roots' is additive: base entries first, duplicates dropped.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            result[key] = list(dict.fromkeys([*result[key], *value]))
        else:
            # Default: Replacement (scalars and other arrays)
            result[key] = value
    return result

"""
Predefined solution-to-JSON converters.

A converter is any callable that maps one solution to a JSON-compatible value.
"""

from typing import Any, Callable, List

JsonConverter = Callable[[Any], Any]


def permutation_to_json(solution) -> List[int]:
    """Convert a permutation solution to the list of its IDs, in order."""
    return list(solution.order)


def subset_to_json(solution) -> List[int]:
    """Convert a subset solution to the sorted list of its selected IDs."""
    return sorted(solution.selected_ids)

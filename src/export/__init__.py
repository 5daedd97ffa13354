"""
Export of analysis results to portable formats.
"""

from .converters import JsonConverter, permutation_to_json, subset_to_json
from .json_export import results_to_dict, results_to_json, write_json

__all__ = [
    "JsonConverter",
    "permutation_to_json",
    "subset_to_json",
    "results_to_dict",
    "results_to_json",
    "write_json",
]

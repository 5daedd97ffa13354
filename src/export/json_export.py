"""
JSON export of analysis results.

The results are written as a single JSON object, nested per problem and per search:

    {"problem-0": {"search-0": [{"times": [12, 333], "values": [0.334, 0.356]}]}}

Each run holds the update times (ms) and the values of the successive best
solutions. If a solution converter is given, the final best solution of each run
is stored as well, under the key "best.solution".
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union, TYPE_CHECKING

from .converters import JsonConverter

if TYPE_CHECKING:
    from ..core.results import ResultsStore

logger = logging.getLogger(__name__)


def results_to_dict(
    results: "ResultsStore",
    solution_converter: Optional[JsonConverter] = None
) -> Dict[str, Any]:
    """
    Convert a results store to a nested dictionary.

    Args:
        results: Results to convert
        solution_converter: Optional function converting a best solution to a JSON value

    Returns:
        Dictionary problem ID -> search ID -> list of run dictionaries
    """
    data: Dict[str, Any] = {}
    for problem_id in results.get_problem_ids():
        problem_data = {}
        for search_id in results.get_search_ids(problem_id):
            problem_data[search_id] = [
                results.get_run(problem_id, search_id, i).to_dict(solution_converter)
                for i in range(results.num_runs(problem_id, search_id))
            ]
        data[problem_id] = problem_data
    return data


def results_to_json(
    results: "ResultsStore",
    solution_converter: Optional[JsonConverter] = None
) -> str:
    """
    Render a results store as a single-line JSON string.

    Args:
        results: Results to render
        solution_converter: Optional function converting a best solution to a JSON value

    Returns:
        Compact JSON document without line breaks

    Raises:
        ValueError: If a value is NaN or infinite, which JSON can not represent
    """
    return json.dumps(
        results_to_dict(results, solution_converter),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False
    )


def write_json(
    results: "ResultsStore",
    path: Union[str, Path],
    solution_converter: Optional[JsonConverter] = None
) -> None:
    """
    Write a results store to a JSON file.

    An existing file is overwritten. Errors raised while writing are propagated;
    a partially written file is not cleaned up.

    Args:
        results: Results to write
        path: Output file path
        solution_converter: Optional function converting a best solution to a JSON value
    """
    filepath = Path(path)
    document = results_to_json(results, solution_converter)

    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(document)
        f.write("\n")

    logger.info(f"Wrote results of {results.num_problems()} problems to {filepath}")

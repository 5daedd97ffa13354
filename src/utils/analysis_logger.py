"""
Progress reporting for search analyses.

The analysis reports its progress to an AnalysisLogger that is passed to it,
instead of writing to a global logger directly:
- NullAnalysisLogger ignores all events (default)
- LoggingAnalysisLogger logs every event, tagged with the "analysis" marker, and
  optionally keeps a JSON record of all events in an output directory
"""

import json
import logging
from pathlib import Path
from typing import List, Dict, Any, Optional, Sequence
from datetime import datetime


logger = logging.getLogger(__name__)

ANALYSIS_MARKER = "analysis"


class AnalysisLogger:
    """
    Receives progress events from a running analysis.

    All hooks are no-ops; subclasses override the ones they are interested in.
    """

    def analysis_started(self, problem_ids: Sequence[str], search_ids: Sequence[str]) -> None:
        pass

    def problem_started(self, problem_id: str) -> None:
        pass

    def burn_in_started(self, problem_id: str, search_id: str, run: int, n_runs: int) -> None:
        pass

    def burn_in_finished(self, problem_id: str, search_id: str, run: int, n_runs: int) -> None:
        pass

    def run_started(self, problem_id: str, search_id: str, run: int, n_runs: int) -> None:
        pass

    def run_finished(self, problem_id: str, search_id: str, run: int, n_runs: int, n_updates: int) -> None:
        pass

    def problem_finished(self, problem_id: str) -> None:
        pass

    def analysis_finished(self) -> None:
        pass


class NullAnalysisLogger(AnalysisLogger):
    """Analysis logger that discards all events."""


class LoggingAnalysisLogger(AnalysisLogger):
    """
    Analysis logger backed by the standard logging module.

    Every event is logged at the configured level with extra={"marker": "analysis"}.
    If an output directory is given, events are also collected and written to
    analysis_events.json after every event, so that the progress of a long running
    analysis can be inspected while it is running.
    """

    EVENTS_FILE = "analysis_events.json"

    def __init__(
        self,
        output_dir: Optional[Path] = None,
        level: int = logging.INFO,
        target: Optional[logging.Logger] = None
    ):
        """
        Initialize the analysis logger.

        Args:
            output_dir: Directory where the event record is saved (optional)
            level: Level at which events are logged
            target: Logger to write to (defaults to this module's logger)
        """
        self.level = level
        self.target = target or logger
        self.events: List[Dict[str, Any]] = []

        self.output_dir = Path(output_dir) if output_dir is not None else None
        if self.output_dir is not None:
            self.output_dir.mkdir(parents=True, exist_ok=True)

    def analysis_started(self, problem_ids: Sequence[str], search_ids: Sequence[str]) -> None:
        self._log(
            "analysis_started",
            f"Started analysis of {len(problem_ids)} problems {list(problem_ids)} "
            f"using {len(search_ids)} searches {list(search_ids)}.",
            problem_ids=list(problem_ids),
            search_ids=list(search_ids)
        )

    def problem_started(self, problem_id: str) -> None:
        self._log("problem_started", f"Analyzing problem {problem_id}.", problem_id=problem_id)

    def burn_in_started(self, problem_id: str, search_id: str, run: int, n_runs: int) -> None:
        self._log(
            "burn_in_started",
            f"Burn-in of search {search_id} applied to problem {problem_id} "
            f"(burn-in run {run}/{n_runs}).",
            problem_id=problem_id, search_id=search_id, run=run, n_runs=n_runs
        )

    def burn_in_finished(self, problem_id: str, search_id: str, run: int, n_runs: int) -> None:
        self._log(
            "burn_in_finished",
            f"Finished burn-in run {run}/{n_runs} of search {search_id} for problem {problem_id}.",
            problem_id=problem_id, search_id=search_id, run=run, n_runs=n_runs
        )

    def run_started(self, problem_id: str, search_id: str, run: int, n_runs: int) -> None:
        self._log(
            "run_started",
            f"Applying search {search_id} to problem {problem_id} (run {run}/{n_runs}).",
            problem_id=problem_id, search_id=search_id, run=run, n_runs=n_runs
        )

    def run_finished(self, problem_id: str, search_id: str, run: int, n_runs: int, n_updates: int) -> None:
        self._log(
            "run_finished",
            f"Finished run {run}/{n_runs} of search {search_id} for problem {problem_id} "
            f"({n_updates} best solution updates).",
            problem_id=problem_id, search_id=search_id, run=run, n_runs=n_runs, n_updates=n_updates
        )

    def problem_finished(self, problem_id: str) -> None:
        self._log("problem_finished", f"Done analyzing problem {problem_id}.", problem_id=problem_id)

    def analysis_finished(self) -> None:
        self._log("analysis_finished", "Analysis complete.")

    def _log(self, phase: str, message: str, **details: Any) -> None:
        """
        Log a single event and record it.

        Args:
            phase: Event name
            message: Human readable message
            **details: Event specific data stored in the event record
        """
        self.target.log(self.level, message, extra={"marker": ANALYSIS_MARKER})

        event = {
            "phase": phase,
            "timestamp": datetime.now().isoformat(),
            **details
        }
        self.events.append(event)

        if self.output_dir is not None:
            self._save_json(self.EVENTS_FILE, {"marker": ANALYSIS_MARKER, "events": self.events})

    def _save_json(self, filename: str, data: Dict):
        """
        Save data to a JSON file.

        Args:
            filename: Name of the file
            data: Data to save
        """
        filepath = self.output_dir / filename

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

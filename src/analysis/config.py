"""
Configuration for search analyses.
"""

import logging
import os
from numbers import Integral
from dataclasses import dataclass, field
from typing import Dict, Any, Union
from pathlib import Path
import yaml

logger = logging.getLogger(__name__)

DEFAULT_NUM_RUNS = 10
DEFAULT_NUM_BURN_IN = 1

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def check_positive(n: int, what: str) -> int:
    """
    Check that a run count is a strictly positive integer.

    Args:
        n: Count to check
        what: Description used in the error message, e.g. "Number of runs"

    Returns:
        The count, as a plain int (numpy integers are accepted)

    Raises:
        ValueError: If the count is not a strictly positive integer
    """
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise ValueError(f"{what} should be an integer, got {n!r}.")
    if n <= 0:
        raise ValueError(f"{what} should be strictly positive, got {n}.")
    return int(n)


@dataclass
class AnalysisConfig:
    """
    Configuration of an analysis.

    Contains the number of measured runs and burn-in runs performed for each search,
    both globally and per search. Burn-in runs are executed before the measured runs
    and their results are discarded.
    """

    # Global run counts
    num_runs: int = DEFAULT_NUM_RUNS
    num_burn_in: int = DEFAULT_NUM_BURN_IN

    # Search specific overrides (search ID -> count)
    search_num_runs: Dict[str, int] = field(default_factory=dict)
    search_num_burn_in: Dict[str, int] = field(default_factory=dict)

    # Logging
    log_level: str = "INFO"
    log_progress: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.num_runs = check_positive(self.num_runs, "Number of runs")
        self.num_burn_in = check_positive(self.num_burn_in, "Number of burn-in runs")
        self.search_num_runs = {
            search_id: check_positive(n, f"Number of runs of search {search_id}")
            for search_id, n in self.search_num_runs.items()
        }
        self.search_num_burn_in = {
            search_id: check_positive(n, f"Number of burn-in runs of search {search_id}")
            for search_id, n in self.search_num_burn_in.items()
        }

        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level}")

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "AnalysisConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            AnalysisConfig instance
        """
        with open(config_path) as f:
            config = yaml.safe_load(f) or {}

        # Extract nested parameters if present
        analysis_config = config.get("analysis", config)

        return cls(**analysis_config)

    @classmethod
    def from_env(cls) -> "AnalysisConfig":
        """
        Load configuration from environment variables.

        Reads the following environment variables:
        - NUM_RUNS: num_runs
        - NUM_BURN_IN: num_burn_in
        - LOG_LEVEL: log_level

        Returns:
            AnalysisConfig instance
        """
        return cls(
            num_runs=int(os.getenv("NUM_RUNS", str(DEFAULT_NUM_RUNS))),
            num_burn_in=int(os.getenv("NUM_BURN_IN", str(DEFAULT_NUM_BURN_IN))),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "num_runs": self.num_runs,
            "num_burn_in": self.num_burn_in,
            "search_num_runs": dict(self.search_num_runs),
            "search_num_burn_in": dict(self.search_num_burn_in),
            "log_level": self.log_level,
            "log_progress": self.log_progress,
        }

    def to_yaml(self, save_path: Union[str, Path]) -> None:
        """
        Save configuration to YAML file.

        Args:
            save_path: Path where to save the configuration
        """
        with open(save_path, 'w') as f:
            yaml.dump({"analysis": self.to_dict()}, f, default_flow_style=False)

        logger.info(f"Saved configuration to {save_path}")

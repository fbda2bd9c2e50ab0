"""Configuration loader for hand evaluation types."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from holdem_cards.evaluation.constants import (
    DEFAULT_FLUSH_SIZE,
    FLUSH_SCORING_MODES,
    FLUSH_SCORING_TOP_FIVE,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationConfig:
    """Configuration for a hand evaluation type."""

    id: str
    name: str = ""
    description: str = ""
    flush_scoring: str = FLUSH_SCORING_TOP_FIVE
    flush_size: int = DEFAULT_FLUSH_SIZE

    def __post_init__(self):
        if self.flush_scoring not in FLUSH_SCORING_MODES:
            raise ValueError(
                f"Invalid flush_scoring '{self.flush_scoring}' for {self.id}, "
                f"expected one of {', '.join(FLUSH_SCORING_MODES)}"
            )
        if self.flush_size < 1:
            raise ValueError(f"Invalid flush_size {self.flush_size} for {self.id}")


class EvaluationConfigLoader:
    """Loads and manages hand evaluation configurations."""

    def __init__(self, config_dir: Path | None = None):
        """
        Initialize the loader.

        Args:
            config_dir: Directory containing evaluation JSON files.
                       Defaults to the package's data/evaluations directory.
        """
        if config_dir is None:
            config_dir = Path(__file__).parents[1] / "data" / "evaluations"

        self.config_dir = Path(config_dir)
        self._configs: dict[str, EvaluationConfig] = {}
        self._loaded = False

    def load_all_configs(self) -> None:
        """Load all evaluation configuration files from the directory."""
        if self._loaded:
            return

        logger.info(f"Loading evaluation configurations from {self.config_dir}")

        if not self.config_dir.exists():
            logger.error(f"Configuration directory not found: {self.config_dir}")
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        json_files = sorted(self.config_dir.glob("*.json"))

        if not json_files:
            logger.warning(f"No JSON configuration files found in {self.config_dir}")

        for json_file in json_files:
            try:
                eval_type = json_file.stem  # filename without extension
                self._configs[eval_type] = self._load_config_file(json_file)
                logger.debug(f"Loaded configuration for {eval_type}")
            except (OSError, TypeError, ValueError) as e:
                logger.error(f"Failed to load configuration from {json_file}: {e}")
                continue

        logger.info(f"Loaded {len(self._configs)} evaluation configurations")
        self._loaded = True

    def _load_config_file(self, filepath: Path) -> EvaluationConfig:
        """
        Load a single evaluation configuration file.

        Raises:
            ValueError: If the file is not valid JSON or has the wrong shape
        """
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

        flush = data.get("flush", {})
        if not isinstance(flush, dict):
            raise ValueError(f"Expected 'flush' to be an object, got {type(flush).__name__}")

        size = flush.get("size", DEFAULT_FLUSH_SIZE)
        if isinstance(size, bool) or not isinstance(size, int):
            raise ValueError(f"Invalid flush size {size!r}, expected an integer")

        return EvaluationConfig(
            id=data.get("id", filepath.stem),
            name=data.get("name", ""),
            description=data.get("description", ""),
            flush_scoring=flush.get("scoring", FLUSH_SCORING_TOP_FIVE),
            flush_size=size,
        )

    def get_config(self, eval_type: str) -> EvaluationConfig | None:
        """
        Get configuration for a specific evaluation type.

        Args:
            eval_type: The evaluation type (e.g., 'holdem')

        Returns:
            EvaluationConfig if found, None otherwise
        """
        if not self._loaded:
            self.load_all_configs()

        return self._configs.get(eval_type)

    def get_all_configs(self) -> dict[str, EvaluationConfig]:
        """Get all loaded configurations."""
        if not self._loaded:
            self.load_all_configs()

        return self._configs.copy()


# Global instance
evaluation_config_loader = EvaluationConfigLoader()


def get_evaluation_config(eval_type: str) -> EvaluationConfig | None:
    """Convenience function to get evaluation configuration."""
    return evaluation_config_loader.get_config(eval_type)

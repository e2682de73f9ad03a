"""
Run Configuration
=================

All tunable settings of an evaluation run live in one dataclass that is
handed to the harness at construction time. Settings can come from the
defaults, a YAML file, or command-line overrides (in that order of
precedence, lowest first).

Example YAML file:

    num_predictions: 70
    test_size: 5000
    test_clicks: true
    output_path: work/aksara_model.pkl

Example:
    config = EvaluationConfig.from_yaml("eval.yaml")
    config = config.with_overrides(test_clicks=True, model_file=None)
"""

from dataclasses import dataclass, asdict, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_NUM_PREDICTIONS = 70
DEFAULT_TEST_SIZE = 5000

# The keyboard only shows (num_predictions - 30) single-aksara keys, so
# coverage is measured with the narrower list.
COVERAGE_PREDICTION_OFFSET = 30


@dataclass(frozen=True)
class EvaluationConfig:
    """
    Settings for one evaluation run.

    Attributes:
        num_predictions: Width of the chunk prediction list used by the
            click-cost simulation; coverage uses num_predictions - 30
        test_size: Upper bound on the number of test words
        test_clicks: Also run the (slow) click-cost simulation
        model_file: Precomputed model to load instead of building one
        output_path: Where a freshly built model is written
        verbose: Print progress banners and progress bars
        ngram_order: Order of the reference n-gram model
        max_chunk_length: Longest chunk the reference model predicts
    """

    num_predictions: int = DEFAULT_NUM_PREDICTIONS
    test_size: int = DEFAULT_TEST_SIZE
    test_clicks: bool = False
    model_file: Optional[str] = None
    output_path: str = "aksara_model.pkl"
    verbose: bool = False
    ngram_order: int = 4
    max_chunk_length: int = 3

    def __post_init__(self):
        for name in ("num_predictions", "test_size", "ngram_order", "max_chunk_length"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer. Got: {value!r}")
        for name in ("test_clicks", "verbose"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false. Got: {getattr(self, name)!r}")
        for name in ("model_file", "output_path"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{name} must be a path string. Got: {value!r}")
        if self.output_path is None:
            raise ValueError("output_path must be set")

        if self.num_predictions <= COVERAGE_PREDICTION_OFFSET:
            raise ValueError(
                f"num_predictions must be greater than {COVERAGE_PREDICTION_OFFSET}. "
                f"Got: {self.num_predictions}"
            )
        if self.test_size < 0:
            raise ValueError(f"test_size must be >= 0. Got: {self.test_size}")
        if self.ngram_order < 1:
            raise ValueError(f"ngram_order must be >= 1. Got: {self.ngram_order}")
        if self.max_chunk_length < 1:
            raise ValueError(f"max_chunk_length must be >= 1. Got: {self.max_chunk_length}")

    @property
    def coverage_predictions(self) -> int:
        """Number of single-aksara predictions shown on the keyboard."""
        return self.num_predictions - COVERAGE_PREDICTION_OFFSET

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EvaluationConfig":
        """Create a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in set(data) - known)
        if unknown:
            raise ValueError(
                f"Unknown configuration keys: {unknown}. Valid keys are: {sorted(known)}"
            )
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "EvaluationConfig":
        """
        Load a config from a YAML file.

        An empty file yields the defaults.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not valid YAML, not a mapping, or has bad values
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Config file {path} is not valid YAML: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
        return cls.from_dict(data)

    def with_overrides(self, **overrides) -> "EvaluationConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_CONFIG = EvaluationConfig()

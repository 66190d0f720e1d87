"""
Configuration module for the person ranking engine.
Loads and validates scoring weights from YAML file using Pydantic models.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Tuple
import logging

from loader import read_document

logger = logging.getLogger(__name__)


class ScoringWeights(BaseModel):
    """Weights for each scoring dimension."""
    overdue_base: float = Field(default=1000, ge=0)
    overdue_per_day: float = Field(default=100, ge=0)
    overdue_day_cap: int = Field(default=10, ge=0)
    high_priority_bonus: float = Field(default=500, ge=0)
    priority_weights: Dict[str, float] = Field(
        default_factory=lambda: {"high": 50, "medium": 20, "low": 5}
    )
    # (max days until due, weight), checked in order
    date_weights: List[Tuple[int, float]] = Field(
        default_factory=lambda: [(1, 5), (3, 3), (7, 2)]
    )
    date_weight_default: float = Field(default=1, ge=0)
    task_count_factor: float = Field(default=0.2, ge=0)

    @field_validator("priority_weights")
    @classmethod
    def _check_priority_weights(cls, value: Dict[str, float]) -> Dict[str, float]:
        missing = {"high", "medium", "low"} - set(value)
        if missing:
            raise ValueError(f"priority_weights missing levels: {', '.join(sorted(missing))}")
        if any(weight < 0 for weight in value.values()):
            raise ValueError("priority_weights must be non-negative")
        return value

    @field_validator("date_weights")
    @classmethod
    def _sort_date_weights(cls, value: List[Tuple[int, float]]) -> List[Tuple[int, float]]:
        if any(weight < 0 for _, weight in value):
            raise ValueError("date_weights must be non-negative")
        return sorted(value, key=lambda bracket: bracket[0])


class Config(BaseModel):
    """Main configuration model."""
    scoring_weights: ScoringWeights = Field(default_factory=ScoringWeights)
    default_strategy: str = "smart"

    @field_validator("default_strategy")
    @classmethod
    def _check_default_strategy(cls, value: str) -> str:
        # ranking imports this module, so resolve strategies lazily
        from ranking.strategies import get_strategy
        return get_strategy(value).value


def load_config(path: str = "config.yaml") -> Config:
    """
    Load and validate configuration from YAML file.

    Args:
        path: Path to configuration file (default: config.yaml)

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML syntax is invalid
        ValueError: If config structure is invalid
    """
    data = read_document(
        path,
        "Configuration file",
        missing_hint=f"Please copy config.example.yaml to {path} and customize it.",
    )

    try:
        config = Config(**data)
    except Exception as e:
        raise ValueError(
            f"Invalid configuration structure in {path}: {e}\n"
            f"Please check config.example.yaml for the correct format."
        )

    logger.info(f"Loaded configuration from {path} (default_strategy={config.default_strategy})")
    return config

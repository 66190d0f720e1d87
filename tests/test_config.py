"""
Tests for configuration loading.
"""

import pytest
import yaml

from config import Config, ScoringWeights, load_config


class TestDefaults:
    """Default weights reproduce the reference scoring."""

    def test_scoring_defaults(self):
        weights = Config().scoring_weights
        assert weights.overdue_base == 1000
        assert weights.overdue_per_day == 100
        assert weights.overdue_day_cap == 10
        assert weights.high_priority_bonus == 500
        assert weights.priority_weights == {"high": 50, "medium": 20, "low": 5}
        assert weights.date_weights == [(1, 5), (3, 3), (7, 2)]
        assert weights.date_weight_default == 1
        assert weights.task_count_factor == 0.2

    def test_default_strategy(self):
        assert Config().default_strategy == "smart"


class TestValidation:
    """Invalid weights are rejected."""

    def test_unknown_default_strategy_rejected(self):
        with pytest.raises(ValueError, match="Unsupported strategy"):
            Config(default_strategy="bogus")

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError):
            ScoringWeights(overdue_base=-1)

    def test_missing_priority_level_rejected(self):
        with pytest.raises(ValueError, match="low"):
            ScoringWeights(priority_weights={"high": 50, "medium": 20})

    def test_date_brackets_sorted(self):
        weights = ScoringWeights(date_weights=[(7, 2), (1, 5)])
        assert weights.date_weights == [(1, 5), (7, 2)]


class TestLoadConfig:
    """YAML loading and error reporting."""

    def test_load_partial_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "default_strategy: urgency\n"
            "scoring_weights:\n"
            "  overdue_base: 250\n"
            "  date_weights:\n"
            "    - [2, 4]\n"
        )
        config = load_config(str(path))
        assert config.default_strategy == "urgency"
        assert config.scoring_weights.overdue_base == 250
        assert config.scoring_weights.date_weights == [(2, 4)]
        assert config.scoring_weights.high_priority_bonus == 500

    def test_example_file_loads(self, pytestconfig):
        path = pytestconfig.rootpath / "config.example.yaml"
        assert load_config(str(path)).model_dump() == Config().model_dump()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        with pytest.raises(ValueError, match="empty"):
            load_config(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("scoring_weights: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_config(str(path))

    def test_invalid_structure(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("scoring_weights:\n  overdue_day_cap: -3\n")
        with pytest.raises(ValueError, match="Invalid configuration structure"):
            load_config(str(path))

    def test_unknown_default_strategy(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("default_strategy: bogus\n")
        with pytest.raises(ValueError, match="bogus"):
            load_config(str(path))

    def test_default_strategy_validated_on_load(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("default_strategy: taskCount\n")
        assert load_config(str(path)).default_strategy == "taskCount"

    def test_json_config(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{\n\t"default_strategy": "role"\n}\n')
        assert load_config(str(path)).default_strategy == "role"

"""
Ranking package for person prioritization.
Provides task extraction, person scoring and sort strategies.
"""

from .engine import RankingEngine, compute_score, rank_persons
from .extractor import TaskExtractor, whole_days_between
from .models import Person, Task, TaskPriority, TaskStatus
from .signals import PersonEvaluation, PersonStats
from .strategies import (
    SortStrategy,
    UnsupportedStrategyError,
    available_strategies,
    get_strategy
)

__all__ = [
    'RankingEngine',
    'compute_score',
    'rank_persons',
    'TaskExtractor',
    'whole_days_between',
    'Person',
    'Task',
    'TaskPriority',
    'TaskStatus',
    'PersonEvaluation',
    'PersonStats',
    'SortStrategy',
    'UnsupportedStrategyError',
    'available_strategies',
    'get_strategy',
]

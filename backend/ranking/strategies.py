"""
Sort strategy registry.

Maps each strategy name (as chosen in the person list) to the sort key
that orders people under it. Use get_strategy() to resolve a name.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union
import unicodedata

from .extractor import TaskExtractor
from .models import Person, Task

# Sorts after every real due date
FAR_FUTURE = datetime(9999, 12, 31)


class UnsupportedStrategyError(ValueError):
    """Raised when a sort strategy name is not registered."""


class SortStrategy(str, Enum):
    """Named orderings for the person list."""
    SMART = "smart"
    TASK_COUNT = "taskCount"
    URGENCY = "urgency"
    PRIORITY = "priority"
    NAME = "name"
    ROLE = "role"

    @property
    def label(self) -> str:
        return STRATEGY_LABELS[self]


STRATEGY_LABELS: Dict[SortStrategy, str] = {
    SortStrategy.SMART: "Smart Sort (Priority + Due Date)",
    SortStrategy.TASK_COUNT: "Most Open Tasks",
    SortStrategy.URGENCY: "Most Urgent Tasks",
    SortStrategy.PRIORITY: "Highest Priority Tasks",
    SortStrategy.NAME: "Name (A-Z)",
    SortStrategy.ROLE: "Role (A-Z)",
}


@dataclass(frozen=True)
class Candidate:
    """A person with the open tasks (and score, for smart sort) computed once per call."""
    person: Person
    open_tasks: Tuple[Task, ...]
    score: Optional[float] = None


SortKey = Callable[[Candidate, datetime], Any]

_extractor = TaskExtractor()


def _char_class(char: str) -> int:
    # whitespace < punctuation and symbols < digits < letters
    if char.isspace():
        return 0
    if char.isdigit():
        return 2
    if char.isalpha():
        return 3
    return 1


def collation_key(text: str) -> Tuple[Tuple[Tuple[int, str], ...], str, Tuple[bool, ...]]:
    """
    Locale-aware comparison key.

    Compares characters first ignoring accents and case, then accents,
    then case with lowercase first, so "émile" sorts between "Emil"
    and "Emma". Within the first level, whitespace sorts before
    punctuation, punctuation before digits, digits before letters
    ("a b" < "a_" < "a1" < "ab").
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    primary = tuple((_char_class(c), c) for c in base.casefold())
    return primary, decomposed.casefold(), tuple(c.isupper() for c in base)


def _far_future(now: datetime) -> datetime:
    return FAR_FUTURE.replace(tzinfo=now.tzinfo)


def _earliest_due(candidate: Candidate, now: datetime) -> datetime:
    earliest = _extractor.earliest_due_date(candidate.open_tasks)
    return earliest if earliest is not None else _far_future(now)


def _smart_key(candidate: Candidate, now: datetime) -> float:
    return -candidate.score


def _task_count_key(candidate: Candidate, now: datetime) -> int:
    return -len(candidate.open_tasks)


def _priority_key(candidate: Candidate, now: datetime) -> Tuple[int, datetime]:
    highest = _extractor.highest_priority(candidate.open_tasks)
    return -highest, _earliest_due(candidate, now)


def _name_key(candidate: Candidate, now: datetime):
    return collation_key(candidate.person.name)


def _role_key(candidate: Candidate, now: datetime):
    return collation_key(candidate.person.role)


# Registry of available strategies
# Maps strategy to the key used with a stable ascending sort
SORT_KEYS: Dict[SortStrategy, SortKey] = {
    SortStrategy.SMART: _smart_key,
    SortStrategy.TASK_COUNT: _task_count_key,
    SortStrategy.URGENCY: _earliest_due,
    SortStrategy.PRIORITY: _priority_key,
    SortStrategy.NAME: _name_key,
    SortStrategy.ROLE: _role_key,
}


def get_strategy(strategy: Union[SortStrategy, str]) -> SortStrategy:
    """
    Resolve a strategy name.

    Args:
        strategy: SortStrategy member or its string value (e.g. "taskCount")

    Returns:
        The matching SortStrategy

    Raises:
        UnsupportedStrategyError: If the name is not registered
    """
    try:
        return SortStrategy(strategy)
    except ValueError:
        raise UnsupportedStrategyError(
            f"Unsupported strategy: {strategy!r}. "
            f"Available strategies: {', '.join(s.value for s in SortStrategy)}"
        ) from None


def available_strategies() -> List[Tuple[str, str]]:
    """(value, label) pairs in display order."""
    return [(s.value, s.label) for s in SortStrategy]

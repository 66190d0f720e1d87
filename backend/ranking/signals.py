"""
Signal dataclasses derived from a person's tasks.
Recomputed on every call; nothing here is persisted.
"""

from dataclasses import dataclass
from typing import Tuple

from .models import Person, Task


@dataclass(frozen=True)
class PersonStats:
    """Open-task breakdown shown next to a person in a ranked list."""
    open_tasks: Tuple[Task, ...]
    overdue_tasks: Tuple[Task, ...]  # subset of open_tasks
    high_priority_tasks: Tuple[Task, ...]  # subset of open_tasks

    @property
    def open_count(self) -> int:
        return len(self.open_tasks)

    @property
    def overdue_count(self) -> int:
        return len(self.overdue_tasks)

    @property
    def high_priority_count(self) -> int:
        return len(self.high_priority_tasks)

    @property
    def has_urgent_tasks(self) -> bool:
        """True if any open task is overdue or high priority."""
        return bool(self.overdue_tasks or self.high_priority_tasks)


@dataclass(frozen=True)
class PersonEvaluation:
    """A ranked person with the score and stats computed for this call."""
    person: Person
    score: float
    stats: PersonStats

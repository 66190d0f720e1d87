"""
Task extraction helpers for person ranking.
Selects a person's open tasks and derives the date/priority signals
the engine and the sort strategies work from.
"""

from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Tuple

from .models import Person, Task, TaskPriority
from .signals import PersonStats

_ONE_DAY = timedelta(days=1)


def whole_days_between(later: datetime, earlier: datetime) -> int:
    """
    Signed number of whole days in ``later - earlier``, truncated toward zero.

    Counts elapsed 24-hour periods, not calendar-day boundaries, so
    23 hours is 0 days and -25 hours is -1 day.
    """
    return int((later - earlier) / _ONE_DAY)


class TaskExtractor:
    """Extracts per-person task signals from a task collection."""

    def open_tasks(self, person: Person, tasks: Iterable[Task]) -> List[Task]:
        """
        Tasks assigned to the person that are not completed.

        Args:
            person: Person to match against assigned_person_ids
            tasks: Full task collection

        Returns:
            Open tasks in their original order
        """
        return [
            task for task in tasks
            if task.is_assigned_to(person.id) and task.is_open
        ]

    def split_overdue(
        self,
        tasks: Iterable[Task],
        now: datetime
    ) -> Tuple[List[Task], List[Task]]:
        """
        Partition tasks into (overdue, not overdue).

        A task is overdue when its due date is strictly before now.
        """
        overdue = []
        not_overdue = []
        for task in tasks:
            if task.due_date < now:
                overdue.append(task)
            else:
                not_overdue.append(task)
        return overdue, not_overdue

    def earliest_due_date(self, tasks: Iterable[Task]) -> Optional[datetime]:
        """Earliest due date among the tasks, or None if there are none."""
        return min((task.due_date for task in tasks), default=None)

    def highest_priority(self, tasks: Iterable[Task]) -> int:
        """Highest priority rank among the tasks; 0 when there are none."""
        return max((task.priority.rank for task in tasks), default=0)

    def person_stats(
        self,
        person: Person,
        tasks: Iterable[Task],
        now: datetime
    ) -> PersonStats:
        """
        Build the open/overdue/high-priority breakdown for a person.

        Args:
            person: Person to summarize
            tasks: Full task collection
            now: Reference time for overdue checks

        Returns:
            PersonStats over the person's open tasks
        """
        open_tasks = self.open_tasks(person, tasks)
        overdue, _ = self.split_overdue(open_tasks, now)
        high_priority = [t for t in open_tasks if t.priority == TaskPriority.HIGH]
        return PersonStats(
            open_tasks=tuple(open_tasks),
            overdue_tasks=tuple(overdue),
            high_priority_tasks=tuple(high_priority),
        )

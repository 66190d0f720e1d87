"""
Person and task models consumed by the ranking engine.
Both are read-only snapshots owned by the caller.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import FrozenSet, Optional


class TaskStatus(str, Enum):
    """Lifecycle state of a task."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    """Priority level of a task."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Ordinal used by the priority sort (high=2, medium=1, low=0)."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    TaskPriority.LOW: 0,
    TaskPriority.MEDIUM: 1,
    TaskPriority.HIGH: 2,
}


@dataclass(frozen=True)
class Person:
    """
    A person tasks can be assigned to.

    Attributes:
        id: Unique identifier referenced by Task.assigned_person_ids
        name: Display name
        role: Job role
        department: Department or team
        email: Contact email (optional)
        avatar_url: Avatar image link (optional)
        created_at: Record creation time (optional)
    """
    id: str
    name: str
    role: str
    department: str
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Task:
    """
    A task assigned to zero or more people by id.

    Attributes:
        id: Unique identifier
        status: TaskStatus
        priority: TaskPriority
        due_date: Due timestamp, comparable with the reference "now"
        assigned_person_ids: Ids of the people the task is assigned to
        title: Short title (optional)
        description: Longer description (optional)
        created_at: Record creation time (optional)
        updated_at: Last update time (optional)
    """
    id: str
    status: TaskStatus
    priority: TaskPriority
    due_date: datetime
    assigned_person_ids: FrozenSet[str] = field(default_factory=frozenset)
    title: str = ""
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        # Accept plain strings and any iterable of ids
        if isinstance(self.assigned_person_ids, str):
            raise TypeError(
                f"Task {self.id}: assigned_person_ids must be an iterable of ids, "
                f"not a string ({self.assigned_person_ids!r})"
            )
        object.__setattr__(self, "status", TaskStatus(self.status))
        object.__setattr__(self, "priority", TaskPriority(self.priority))
        object.__setattr__(self, "assigned_person_ids", frozenset(self.assigned_person_ids))

    @property
    def is_open(self) -> bool:
        return self.status != TaskStatus.COMPLETED

    def is_assigned_to(self, person_id: str) -> bool:
        return person_id in self.assigned_person_ids

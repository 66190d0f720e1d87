"""
Snapshot loading for the ranking engine.
Validates person and task rows exported from the data store and
converts them to ranking models. Read-only: nothing is written back.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import logging

from pydantic import BaseModel, Field, field_validator

from loader import read_document
from ranking.models import Person, Task, TaskPriority, TaskStatus

logger = logging.getLogger(__name__)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class PersonRow(BaseModel):
    """Row from the persons table."""
    id: str
    name: str = Field(min_length=1)
    role: str = Field(min_length=1)
    department: str = Field(min_length=1)
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("created_at")
    @classmethod
    def _utc(cls, value):
        return _as_utc(value)

    def to_person(self) -> Person:
        return Person(
            id=self.id,
            name=self.name,
            role=self.role,
            department=self.department,
            email=self.email,
            avatar_url=self.avatar_url,
            created_at=self.created_at,
        )


class TaskRow(BaseModel):
    """Row from the tasks table."""
    id: str
    title: str = ""
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: datetime
    assigned_person_ids: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("due_date", "created_at", "updated_at")
    @classmethod
    def _utc(cls, value):
        return _as_utc(value)

    def to_task(self) -> Task:
        return Task(
            id=self.id,
            status=self.status,
            priority=self.priority,
            due_date=self.due_date,
            assigned_person_ids=frozenset(self.assigned_person_ids),
            title=self.title,
            description=self.description,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class SnapshotRows(BaseModel):
    """Top-level snapshot document."""
    persons: List[PersonRow] = Field(default_factory=list)
    tasks: List[TaskRow] = Field(default_factory=list)


@dataclass
class Snapshot:
    """People and tasks ready for ranking."""
    persons: List[Person]
    tasks: List[Task]


def parse_snapshot(data: Dict[str, Any]) -> Snapshot:
    """
    Validate snapshot rows and convert them to ranking models.

    Args:
        data: Mapping with 'persons' and 'tasks' row lists

    Returns:
        Snapshot with Person and Task objects in row order

    Raises:
        pydantic.ValidationError: If a row is missing fields or has bad values
    """
    rows = SnapshotRows(**data)
    persons = [row.to_person() for row in rows.persons]
    tasks = [row.to_task() for row in rows.tasks]

    known_ids = {person.id for person in persons}
    for task in tasks:
        unknown = task.assigned_person_ids - known_ids
        if unknown:
            logger.warning(
                f"Task {task.id} references unknown person ids: {', '.join(sorted(unknown))}"
            )

    return Snapshot(persons=persons, tasks=tasks)


def load_snapshot(path: str) -> Snapshot:
    """
    Load people and tasks from a YAML or JSON export.

    Args:
        path: Path to snapshot file

    Returns:
        Validated Snapshot

    Raises:
        FileNotFoundError: If snapshot file doesn't exist
        yaml.YAMLError: If YAML syntax is invalid
        ValueError: If JSON syntax is invalid, file is empty or rows are invalid
    """
    data = read_document(path, "Snapshot file")
    if not isinstance(data, dict):
        raise ValueError(f"Snapshot file {path} must contain a mapping with 'persons' and 'tasks'")

    try:
        snapshot = parse_snapshot(data)
    except Exception as e:
        raise ValueError(
            f"Invalid snapshot structure in {path}: {e}"
        )

    logger.info(
        f"Loaded snapshot from {path}: "
        f"persons={len(snapshot.persons)} tasks={len(snapshot.tasks)}"
    )
    return snapshot

"""Data models for the task list."""

from dataclasses import dataclass
from enum import Enum


class TaskPriority(Enum):
    """Task priority, declared from most to least pressing."""

    URGENT = "Urgent"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        """Sort rank (0 is most pressing)."""
        return list(TaskPriority).index(self)

    @classmethod
    def parse(cls, value: object, default: "TaskPriority | None" = None) -> "TaskPriority":
        """Parse a priority name, falling back to default (Medium) when unknown."""
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return default or cls.MEDIUM


class TaskValidationError(ValueError):
    """Raised when a task fails validation."""


@dataclass
class Task:
    """A to-do item.

    Attributes:
        id: Unique task identifier
        description: What needs doing (non-blank)
        deadline: Optional free-form deadline (e.g. "2025-10-20")
        priority: Current priority level
        completed: Whether the task is done
    """

    id: str
    description: str
    deadline: str | None = None
    priority: TaskPriority = TaskPriority.MEDIUM
    completed: bool = False

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise TaskValidationError("Task description cannot be empty.")
        self.description = self.description.strip()


__all__ = ["Task", "TaskPriority", "TaskValidationError"]

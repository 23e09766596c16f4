"""Task list management.

Keeps tasks ordered with incomplete work first, most pressing on top.
"""

import logging
import uuid
from collections.abc import Sequence

from .models import Task, TaskPriority

logger = logging.getLogger(__name__)


class TaskList:
    """Ordered collection of tasks."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def add(self, description: str, deadline: str | None = None) -> Task:
        """Add a new task at the top with Medium priority.

        Raises:
            TaskValidationError: If description is blank.
        """
        task = Task(
            id=uuid.uuid4().hex,
            description=description,
            deadline=deadline or None,
            priority=TaskPriority.MEDIUM,
        )
        self._tasks.insert(0, task)
        logger.info(f"Added task: {task.description}")
        return task

    def toggle(self, task_id: str) -> Task | None:
        """Flip the completed flag of a task. Returns None if not found."""
        for task in self._tasks:
            if task.id == task_id:
                task.completed = not task.completed
                return task
        return None

    def get(self, task_id: str) -> Task | None:
        """Find a task by id."""
        return next((t for t in self._tasks if t.id == task_id), None)

    def incomplete(self) -> list[Task]:
        """Tasks not yet completed, in insertion order."""
        return [t for t in self._tasks if not t.completed]

    def replace_incomplete(self, prioritized: Sequence[Task]) -> None:
        """Replace incomplete tasks with a prioritized list.

        Completed tasks are kept after the prioritized ones.
        """
        completed = [t for t in self._tasks if t.completed]
        self._tasks = list(prioritized) + completed

    def sorted(self) -> list[Task]:
        """Tasks for display: incomplete first, then by priority."""
        return sorted(self._tasks, key=lambda t: (t.completed, t.priority.rank))

    def __len__(self) -> int:
        return len(self._tasks)


__all__ = ["TaskList"]

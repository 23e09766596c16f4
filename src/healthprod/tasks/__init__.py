"""Tasks module for HealthProd.

Provides the task model and the ordered task list.
"""

from .models import Task, TaskPriority, TaskValidationError
from .task_list import TaskList

__all__ = ["Task", "TaskList", "TaskPriority", "TaskValidationError"]

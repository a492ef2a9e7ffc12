"""Todo Service - in-memory task list exposed over HTTP."""

from .config import Settings, load_settings
from .main import create_app
from .models import ListOptions, Task
from .store import DuplicateIdError, TaskNotFoundError, TodoStore, TodoStoreError

__all__ = [
    "create_app",
    "Settings",
    "load_settings",
    "Task",
    "ListOptions",
    "TodoStore",
    "TodoStoreError",
    "DuplicateIdError",
    "TaskNotFoundError",
]

"""
Async-safe in-memory task store.

A single ``asyncio.Lock`` serializes every operation, the read-only snapshot
included, so callers always observe the collection either entirely before or
entirely after any other operation.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Optional

from .models import Task


class TodoStoreError(Exception):
    """Base class for store failures."""

    def __init__(self, task_id: int, message: str):
        super().__init__(message)
        self.task_id = task_id


class DuplicateIdError(TodoStoreError):
    """A task with the requested id is already stored."""

    def __init__(self, task_id: int):
        super().__init__(task_id, f"task {task_id} already exists")


class TaskNotFoundError(TodoStoreError):
    """No stored task has the requested id."""

    def __init__(self, task_id: int):
        super().__init__(task_id, f"task {task_id} not found")


class TodoStore:
    """Ordered task collection guarded by one exclusive lock.

    Tasks keep their insertion order. Replacing a task keeps its position and
    removing one shifts the following tasks forward. Every lookup is a linear
    scan.
    """

    def __init__(self, tasks: Iterable[Task] = ()):
        self._tasks: list[Task] = []
        self._lock = asyncio.Lock()
        for task in tasks:
            if self._index_of(task.id) is not None:
                raise DuplicateIdError(task.id)
            self._tasks.append(task)

    def _index_of(self, task_id: int) -> Optional[int]:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    async def snapshot(self, offset: int = 0, limit: Optional[int] = None) -> list[Task]:
        """Return up to ``limit`` tasks after skipping ``offset`` of them.

        ``limit=None`` means unbounded. An offset past the end yields an empty
        list.
        """
        start = max(offset, 0)
        async with self._lock:
            if limit is None:
                return self._tasks[start:]
            return self._tasks[start : start + max(limit, 0)]

    async def insert(self, task: Task) -> None:
        """Append ``task`` unless its id is already taken.

        Raises:
            DuplicateIdError: another stored task has the same id.
        """
        async with self._lock:
            if self._index_of(task.id) is not None:
                raise DuplicateIdError(task.id)
            self._tasks.append(task)

    async def replace(self, task_id: int, task: Task) -> None:
        """Replace the task stored under ``task_id`` with ``task`` in place.

        ``task`` may carry a different id, which renames the entry, as long as
        no other stored task already uses that id.

        Raises:
            TaskNotFoundError: nothing is stored under ``task_id``.
            DuplicateIdError: the new id belongs to another stored task.
        """
        async with self._lock:
            index = self._index_of(task_id)
            if index is None:
                raise TaskNotFoundError(task_id)
            if task.id != task_id and self._index_of(task.id) is not None:
                raise DuplicateIdError(task.id)
            self._tasks[index] = task

    async def remove(self, task_id: int) -> None:
        """Drop the task stored under ``task_id``.

        Raises:
            TaskNotFoundError: nothing is stored under ``task_id``.
        """
        async with self._lock:
            before = len(self._tasks)
            self._tasks = [task for task in self._tasks if task.id != task_id]
            if len(self._tasks) == before:
                raise TaskNotFoundError(task_id)

    async def count(self) -> int:
        async with self._lock:
            return len(self._tasks)

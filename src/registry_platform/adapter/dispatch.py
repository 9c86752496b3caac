"""Task dispatch to a registry-supplied executor or a fallback strategy."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Executor, Future
from typing import Any

Task = Callable[[], Any]


def run_inline(task: Task | None) -> None:
    """Run ``task`` on the calling thread; used when asynchronous execution is disabled."""
    if task is not None:
        task()


class TaskDispatcher:
    """Two-branch dispatch chosen once, at construction."""

    def __init__(self, executor: Executor | None, fallback: Callable[[Task | None], None]) -> None:
        self.executor = executor
        self.fallback = fallback

    def submit(self, task: Task | None) -> Future[Any] | None:
        """Hand ``task`` to the executor, or to the fallback when there is none."""
        if task is not None and self.executor is not None:
            return self.executor.submit(task)
        self.fallback(task)
        return None


__all__ = ["Task", "TaskDispatcher", "run_inline"]

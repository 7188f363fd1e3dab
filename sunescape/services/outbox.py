"""Best-effort side channel for notifications.

Jobs are queued on FastAPI BackgroundTasks and run after the response is sent.
A failing job is logged and dropped; it never changes the outcome of the
request that queued it.
"""
import logging
from typing import Any, Callable

from fastapi import BackgroundTasks

log = logging.getLogger("uvicorn.error")


def _run_best_effort(label: str, fn: Callable[..., Any], *args, **kwargs) -> None:
    try:
        fn(*args, **kwargs)
    except Exception:
        log.exception("[Outbox] %s failed; discarded", label)


class Outbox:
    def __init__(self, background_tasks: BackgroundTasks):
        self._tasks = background_tasks
        self.queued: list[str] = []

    def enqueue(self, label: str, fn: Callable[..., Any], *args, **kwargs) -> None:
        self.queued.append(label)
        self._tasks.add_task(_run_best_effort, label, fn, *args, **kwargs)

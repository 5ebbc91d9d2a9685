"""Task primitive: shared work ledger for cooperating agents."""

from .api import claim_task, complete_task, create_task, get_task, list_tasks, unclaim_task
from .results import Outcome, TaskResult
from .view import to_public

__all__ = [
    "Outcome",
    "TaskResult",
    "claim_task",
    "complete_task",
    "create_task",
    "get_task",
    "list_tasks",
    "to_public",
    "unclaim_task",
]

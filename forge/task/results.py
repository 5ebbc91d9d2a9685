"""Tagged outcome of a lifecycle transition."""

from dataclasses import dataclass
from enum import Enum

from forge.core.models import Task
from forge.errors import InvalidTransitionError, TaskNotFoundError


class Outcome(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID_STATE = "invalid_state"


@dataclass(frozen=True)
class TaskResult:
    """Result of claim/complete/unclaim.

    `task` is the updated task on OK, the untouched task on INVALID_STATE,
    and None on NOT_FOUND.
    """

    outcome: Outcome
    task_id: str
    task: Task | None = None
    expected: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> Task:
        if self.outcome is Outcome.NOT_FOUND:
            raise TaskNotFoundError(self.task_id)
        if self.outcome is Outcome.INVALID_STATE:
            raise InvalidTransitionError(self.task_id, self.task.status.value, self.expected or "")
        return self.task

    @classmethod
    def success(cls, task: Task) -> "TaskResult":
        return cls(Outcome.OK, task.id, task)

    @classmethod
    def not_found(cls, task_id: str) -> "TaskResult":
        return cls(Outcome.NOT_FOUND, task_id)

    @classmethod
    def invalid_state(cls, task: Task, expected: str) -> "TaskResult":
        return cls(Outcome.INVALID_STATE, task.id, task, expected)

"""Task lifecycle: create, get, list, claim, complete, unclaim.

Every call loads the whole store, acts, and saves only when it changed
something. There is no lock around the load-mutate-save sequence.
"""

import logging

from forge.core.models import Bounty, Priority, Task, TaskStatus
from forge.errors import ValidationError
from forge.lib import clock, ids
from forge.lib.store import TaskStore
from forge.task.results import TaskResult

logger = logging.getLogger(__name__)


def create_task(
    store: TaskStore,
    title: str,
    *,
    creator: str,
    description: str | None = None,
    priority: Priority | str = Priority.MEDIUM,
    tags: list[str] | None = None,
    bounty: Bounty | None = None,
) -> Task:
    if not title or not title.strip():
        raise ValidationError("Title is required")

    tasks = store.load()
    now = clock.now_ms()
    task = Task(
        id=ids.unique_id(tasks, now),
        title=title,
        description=description or None,
        status=TaskStatus.OPEN,
        priority=Priority(priority or Priority.MEDIUM),
        creator=creator,
        assignee=None,
        tags=list(tags or []),
        bounty=bounty,
        created_at=now,
        updated_at=now,
    )

    tasks[task.id] = task
    store.save(tasks)
    logger.debug("Created task %s priority=%s creator=%s", task.id, task.priority.value, creator)
    return task


def get_task(store: TaskStore, task_id: str) -> Task | None:
    return store.load().get(task_id)


def list_tasks(store: TaskStore, status: TaskStatus | str | None = None) -> list[Task]:
    """Tasks with exactly `status` (all when None), newest first."""
    tasks = list(store.load().values())
    if status:
        wanted = TaskStatus(status)
        tasks = [t for t in tasks if t.status is wanted]
    return sorted(tasks, key=lambda t: t.created_at, reverse=True)


def _transition(
    store: TaskStore, task_id: str, required: TaskStatus, apply
) -> TaskResult:
    tasks = store.load()
    task = tasks.get(task_id)
    if task is None:
        return TaskResult.not_found(task_id)
    if task.status is not required:
        return TaskResult.invalid_state(task, required.value)

    previous = task.status
    apply(task, clock.later_than(task.updated_at))
    store.save(tasks)
    logger.debug("Task %s %s -> %s", task_id, previous.value, task.status.value)
    return TaskResult.success(task)


def claim_task(store: TaskStore, task_id: str, assignee: str) -> TaskResult:
    def apply(task: Task, now: int) -> None:
        task.status = TaskStatus.CLAIMED
        task.assignee = assignee
        task.updated_at = now

    return _transition(store, task_id, TaskStatus.OPEN, apply)


def complete_task(store: TaskStore, task_id: str, proof: str | None = None) -> TaskResult:
    def apply(task: Task, now: int) -> None:
        task.status = TaskStatus.COMPLETED
        task.updated_at = now
        task.completed_at = now
        if proof:
            task.proof = proof

    return _transition(store, task_id, TaskStatus.CLAIMED, apply)


def unclaim_task(store: TaskStore, task_id: str) -> TaskResult:
    def apply(task: Task, now: int) -> None:
        task.status = TaskStatus.OPEN
        task.assignee = None
        task.updated_at = now

    return _transition(store, task_id, TaskStatus.CLAIMED, apply)

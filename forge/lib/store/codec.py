"""Task <-> JSON record conversion.

Records use camelCase keys; optional fields are omitted when absent.
"""

from typing import Any

from forge.core.models import Bounty, Priority, Task, TaskStatus


def to_record(task: Task) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "status": task.status.value,
        "priority": task.priority.value,
        "creator": task.creator,
        "assignee": task.assignee,
        "tags": list(task.tags),
    }
    if task.bounty is not None:
        record["bounty"] = {"amount": task.bounty.amount, "currency": task.bounty.currency}
    if task.proof is not None:
        record["proof"] = task.proof
    record["createdAt"] = task.created_at
    record["updatedAt"] = task.updated_at
    if task.completed_at is not None:
        record["completedAt"] = task.completed_at
    return record


def from_record(record: dict[str, Any]) -> Task:
    """Decode one stored record. Raises KeyError/TypeError/ValueError when malformed."""
    if not isinstance(record, dict):
        raise TypeError(f"Task record must be an object, got {type(record).__name__}")

    bounty = None
    raw_bounty = record.get("bounty")
    if raw_bounty is not None:
        bounty = Bounty(amount=float(raw_bounty["amount"]), currency=str(raw_bounty["currency"]))

    completed_at = record.get("completedAt")

    return Task(
        id=str(record["id"]),
        title=str(record["title"]),
        description=record.get("description"),
        status=TaskStatus(record["status"]),
        priority=Priority(record.get("priority") or Priority.MEDIUM.value),
        creator=str(record.get("creator") or ""),
        assignee=record.get("assignee"),
        tags=[str(t) for t in record.get("tags") or []],
        bounty=bounty,
        proof=record.get("proof"),
        created_at=int(record["createdAt"]),
        updated_at=int(record["updatedAt"]),
        completed_at=int(completed_at) if completed_at is not None else None,
    )


def encode_document(tasks: dict[str, Task]) -> dict[str, Any]:
    return {"tasks": {task_id: to_record(task) for task_id, task in tasks.items()}}


def decode_document(document: Any) -> dict[str, Task]:
    if not isinstance(document, dict) or not isinstance(document.get("tasks"), dict):
        raise ValueError("Document must be an object with a 'tasks' mapping")
    return {task_id: from_record(record) for task_id, record in document["tasks"].items()}


__all__ = ["decode_document", "encode_document", "from_record", "to_record"]

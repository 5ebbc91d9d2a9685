"""Task formatting for CLI display."""

from forge.core.models import Priority, Task
from forge.task.view import to_public

PRIORITY_MARKERS = {Priority.HIGH: "(HIGH)", Priority.MEDIUM: "(MED)", Priority.LOW: ""}


def format_bounty(task: Task) -> str:
    if task.bounty is None:
        return ""
    return f"{task.bounty.amount:g} {task.bounty.currency}"


def format_task_line(task: Task) -> str:
    marker = PRIORITY_MARKERS[task.priority]
    bounty = f" [{format_bounty(task)}]" if task.bounty else ""
    assignee = f" → {task.assignee}" if task.assignee else ""
    return f"  {task.id}: {task.title} {marker}{bounty}{assignee}"


def format_task_list(tasks: list[Task], status: str | None = None) -> str:
    """Heading plus one line per task with priority, bounty and assignee."""
    if not tasks:
        return f"No {status + ' ' if status else ''}tasks found."

    heading = status.capitalize() if status else "All"
    lines = [f"[FORGE] {heading} tasks ({len(tasks)}):", ""]
    lines.extend(format_task_line(task) for task in tasks)
    return "\n".join(lines)


def format_task_detail(task: Task) -> str:
    """Format full task details."""
    pub = to_public(task)
    lines = [
        f"Task: {task.id}",
        f"  Title: {task.title}",
    ]
    if task.description:
        lines.append(f"  Description: {task.description}")
    lines.append(f"  Status: {task.status.value}")
    lines.append(f"  Priority: {task.priority.value}")
    lines.append(f"  Creator: {task.creator}")
    if task.assignee:
        lines.append(f"  Assignee: {task.assignee}")
    if task.tags:
        lines.append(f"  Tags: {', '.join(task.tags)}")
    if task.bounty:
        lines.append(f"  Bounty: {format_bounty(task)}")
    lines.append(f"  Created: {pub['created_at'].isoformat()}")
    if pub["completed_at"] is not None:
        lines.append(f"  Completed: {pub['completed_at'].isoformat()}")
    if task.proof:
        lines.append(f"  Proof: {task.proof}")
    return "\n".join(lines)


def broadcast_created(task: Task) -> str:
    lines = [
        f'[FORGE] New task: "{task.title}" ({task.priority.value.upper()})',
        f"ID: {task.id} | Creator: {task.creator}",
    ]
    if task.bounty:
        lines.append(f"Bounty: {format_bounty(task)}")
    if task.tags:
        lines.append(f"Tags: {', '.join(task.tags)}")
    lines.append(f"Claim with: forge claim {task.id}")
    return "\n".join(lines)


def broadcast_claimed(task: Task) -> str:
    return f'[FORGE] Task claimed: "{task.title}" by {task.assignee}\nID: {task.id}'


def broadcast_completed(task: Task) -> str:
    lines = [f'[FORGE] Task completed: "{task.title}" by {task.assignee}', f"ID: {task.id}"]
    if task.proof:
        lines.append(f"Proof: {task.proof}")
    return "\n".join(lines)


def broadcast_unclaimed(task: Task) -> str:
    return (
        f'[FORGE] Task available: "{task.title}"\n'
        f"ID: {task.id} | Claim with: forge claim {task.id}"
    )

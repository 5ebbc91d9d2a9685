"""Task commands: create, list, show, claim, complete, unclaim."""

from typing import Annotated, NoReturn

import typer

from forge.cli import output
from forge.cli.errors import error_feedback
from forge.config import get_settings
from forge.core.models import Bounty, Priority, TaskStatus
from forge.lib.store import TaskStore, default_store, to_record
from forge.task import api
from forge.task.format import (
    broadcast_claimed,
    broadcast_completed,
    broadcast_created,
    broadcast_unclaimed,
    format_task_detail,
    format_task_list,
)
from forge.task.results import Outcome, TaskResult
from forge.task.validation import split_tags

FAILURE_REASONS = {
    "claim": "not open",
    "complete": "not claimed",
    "unclaim": "not claimed",
}


def _store(ctx: typer.Context) -> TaskStore:
    store = ctx.obj.get("store") if ctx.obj else None
    return store if store is not None else default_store()


def _fail(action: str, result: TaskResult) -> NoReturn:
    if result.outcome is Outcome.NOT_FOUND:
        reason = "not found"
    else:
        reason = f"{FAILURE_REASONS[action]} (status: {result.task.status.value})"
    output.fail(f"Cannot {action} task {result.task_id} - {reason}")


@error_feedback
def create(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Task title"),
    description: Annotated[
        str | None, typer.Option("--description", "-d", help="Task description")
    ] = None,
    priority: Annotated[
        Priority, typer.Option("--priority", "-p", help="Priority: low, medium, high")
    ] = Priority.MEDIUM,
    tags: Annotated[str | None, typer.Option("--tags", "-t", help="Comma-separated tags")] = None,
    bounty: Annotated[float | None, typer.Option("--bounty", "-b", help="Bounty amount")] = None,
    currency: Annotated[
        str | None, typer.Option("--currency", "-c", help="Bounty currency")
    ] = None,
    creator: Annotated[str | None, typer.Option("--creator", help="Creator agent ID")] = None,
):
    """Create a new task."""
    settings = get_settings()
    task = api.create_task(
        _store(ctx),
        title,
        description=description,
        priority=priority,
        creator=creator or settings.creator,
        tags=split_tags(tags) if tags else [],
        bounty=Bounty(bounty, currency or settings.currency) if bounty is not None else None,
    )

    output.emit(
        ctx,
        to_record(task),
        f"✓ Task created: {task.id}\n",
        broadcast_created(task),
    )


@error_feedback
def list_cmd(
    ctx: typer.Context,
    status: Annotated[
        TaskStatus | None,
        typer.Option("--status", "-s", help="Filter by status: open, claimed, completed"),
    ] = None,
    show_all: bool = typer.Option(False, "--all", "-a", help="Show all tasks"),
):
    """List tasks (open by default)."""
    if show_all:
        status = None
    elif status is None:
        status = TaskStatus.OPEN

    tasks = api.list_tasks(_store(ctx), status)

    text = format_task_list(tasks, status.value if status else None)
    output.emit(ctx, [to_record(t) for t in tasks], text)


@error_feedback
def show(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID"),
):
    """Show task details."""
    task = api.get_task(_store(ctx), task_id)
    if task is None:
        output.fail(f"Task not found: {task_id}")

    output.emit(ctx, to_record(task), format_task_detail(task), essential=True)


@error_feedback
def claim(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID to claim"),
    agent: Annotated[
        str | None, typer.Option("--agent", help="Agent ID claiming the task")
    ] = None,
):
    """Claim an open task."""
    result = api.claim_task(_store(ctx), task_id, agent or get_settings().agent)
    if not result.ok:
        _fail("claim", result)

    task = result.task
    output.emit(
        ctx,
        to_record(task),
        f'✓ Task claimed: {task.id}\n  "{task.title}" now assigned to {task.assignee}\n',
        broadcast_claimed(task),
    )


@error_feedback
def complete(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID to complete"),
    proof: Annotated[
        str | None, typer.Option("--proof", help="Proof of completion (PR link, commit, etc.)")
    ] = None,
):
    """Mark a claimed task as completed."""
    result = api.complete_task(_store(ctx), task_id, proof)
    if not result.ok:
        _fail("complete", result)

    task = result.task
    output.emit(
        ctx,
        to_record(task),
        f'✓ Task completed: {task.id}\n  "{task.title}" marked done\n',
        broadcast_completed(task),
    )


@error_feedback
def unclaim(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID to release"),
):
    """Release a claimed task."""
    result = api.unclaim_task(_store(ctx), task_id)
    if not result.ok:
        _fail("unclaim", result)

    task = result.task
    output.emit(
        ctx,
        to_record(task),
        f'✓ Task unclaimed: {task.id}\n  "{task.title}" is now available\n',
        broadcast_unclaimed(task),
    )


def register(app: typer.Typer) -> None:
    """Mount the task commands at the top level of `app`."""
    app.command("create")(create)
    app.command("list")(list_cmd)
    app.command("show")(show)
    app.command("claim")(claim)
    app.command("complete")(complete)
    app.command("unclaim")(unclaim)


__all__ = ["register"]

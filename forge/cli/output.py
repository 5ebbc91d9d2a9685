"""How task commands print: a JSON record under --json, text otherwise."""

import json
from typing import Any, NoReturn

import typer


def init_context(ctx: typer.Context, json_output: bool = False, quiet_output: bool = False) -> None:
    """Store the root output flags, keeping objects already on ctx.obj (e.g. a store)."""
    if not isinstance(ctx.obj, dict):
        ctx.obj = {}
    ctx.obj.update(json_output=json_output, quiet_output=quiet_output)


def _flag(ctx: typer.Context, name: str) -> bool:
    return bool(ctx.obj and ctx.obj.get(name))


def emit(ctx: typer.Context, data: Any, *lines: str, essential: bool = False) -> None:
    """Print `data` as JSON in --json mode, else `lines`.

    --quiet drops the text unless it is `essential`; JSON is always printed.
    """
    if _flag(ctx, "json_output"):
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
    elif essential or not _flag(ctx, "quiet_output"):
        for line in lines:
            typer.echo(line)


def fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(1)

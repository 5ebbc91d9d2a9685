"""FastAPI app: JSON task API and the dashboard page."""

import logging
from typing import Any

import typer
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse

from forge import __version__
from forge.api.dashboard import DASHBOARD_HTML
from forge.config import check_loopback, get_settings
from forge.core.models import TaskStatus
from forge.errors import ConfigError
from forge.lib import paths
from forge.lib.log import setup_logging
from forge.lib.store import TaskStore, default_store, to_record
from forge.task import api
from forge.task.results import Outcome, TaskResult
from forge.task.validation import validate_new_task

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_store(request: Request) -> TaskStore:
    store = request.app.state.store
    return store if store is not None else default_store()


def _respond(action: str, result: TaskResult) -> dict[str, Any]:
    if result.outcome is Outcome.NOT_FOUND:
        raise HTTPException(status_code=404, detail=f"Cannot {action} task: not found")
    if result.outcome is Outcome.INVALID_STATE:
        raise HTTPException(
            status_code=409,
            detail=f"Cannot {action} task: status is {result.task.status.value}",
        )
    return to_record(result.task)


@router.get("/tasks")
async def list_tasks(status: TaskStatus | None = None, store: TaskStore = Depends(get_store)):
    return [to_record(t) for t in api.list_tasks(store, status)]


@router.get("/tasks/{task_id}")
async def get_task(task_id: str, store: TaskStore = Depends(get_store)):
    task = api.get_task(store, task_id)
    if task is None:
        raise HTTPException(status_code=404, detail=f"Task {task_id} not found")
    return to_record(task)


@router.post("/tasks")
async def create_task(request: Request, store: TaskStore = Depends(get_store)):
    payload = await _read_payload(request)
    checked = validate_new_task(payload, default_creator=get_settings().web_creator)
    if not checked.ok:
        raise HTTPException(status_code=400, detail=checked.error)

    new = checked.value
    task = api.create_task(
        store,
        new.title,
        description=new.description,
        priority=new.priority,
        tags=new.tags,
        creator=new.creator,
    )
    return to_record(task)


@router.post("/tasks/{task_id}/claim")
async def claim_task(task_id: str, request: Request, store: TaskStore = Depends(get_store)):
    agent = _text_field(await _read_payload(request), "agent") or get_settings().web_creator
    return _respond("claim", api.claim_task(store, task_id, agent))


@router.post("/tasks/{task_id}/complete")
async def complete_task(
    task_id: str, request: Request, store: TaskStore = Depends(get_store)
):
    proof = _text_field(await _read_payload(request), "proof")
    return _respond("complete", api.complete_task(store, task_id, proof))


@router.post("/tasks/{task_id}/unclaim")
async def unclaim_task(task_id: str, store: TaskStore = Depends(get_store)):
    return _respond("unclaim", api.unclaim_task(store, task_id))


async def _read_payload(request: Request) -> dict[str, Any]:
    """JSON or form body as a plain dict; anything unreadable becomes {}."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        return dict(form)
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


def _text_field(payload: dict[str, Any], name: str) -> str | None:
    value = payload.get(name)
    return value if isinstance(value, str) and value else None


async def dashboard() -> HTMLResponse:
    return HTMLResponse(DASHBOARD_HTML)


def create_app(store: TaskStore | None = None) -> FastAPI:
    """Build the app around `store`; the per-user task file when omitted."""
    app = FastAPI(title="Forge", version=__version__)
    app.state.store = store
    app.include_router(router)
    app.add_api_route("/", dashboard, methods=["GET"], response_class=HTMLResponse)
    return app


app = create_app()


def run(host: str, port: int) -> None:
    """Serve the app with uvicorn; only loopback hosts are accepted."""
    import uvicorn

    check_loopback(host)
    typer.echo(f"Forge Web UI running at http://{host}:{port}", err=True)
    logger.debug("Serving tasks from %s", paths.tasks_file())
    uvicorn.run(app, host=host, port=port, access_log=False)


def main():
    setup_logging()
    try:
        settings = get_settings()
        run(settings.host, settings.port)
    except ConfigError as e:
        raise SystemExit(str(e)) from e


if __name__ == "__main__":
    main()

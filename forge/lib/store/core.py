"""Task store: whole-document load and save over a backend."""

import json
import logging
from pathlib import Path

from forge.core.models import Task
from forge.lib import paths
from forge.lib.store import codec
from forge.lib.store.backends import Backend, FileBackend

logger = logging.getLogger(__name__)


class TaskStore:
    """Mapping of task id to Task, read fully and rewritten fully.

    No cache: every load goes back to the backend so separate processes see
    each other's writes.
    """

    def __init__(self, backend: Backend):
        self.backend = backend

    @property
    def path(self) -> Path | None:
        return getattr(self.backend, "path", None)

    def load(self) -> dict[str, Task]:
        text = self.backend.read()
        if text is None:
            return {}
        try:
            return codec.decode_document(json.loads(text))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(
                "Could not parse task store %s (%s), starting with empty store",
                self.path or self.backend,
                e,
            )
            return {}

    def save(self, tasks: dict[str, Task]) -> None:
        text = json.dumps(codec.encode_document(tasks), indent=2, ensure_ascii=False)
        self.backend.write(text)
        logger.debug("Saved %d tasks", len(tasks))


def default_store() -> TaskStore:
    """Store over the per-user tasks file (FORGE_HOME or ~/.forge)."""
    return TaskStore(FileBackend(paths.tasks_file()))

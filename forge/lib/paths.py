import os
from pathlib import Path


def forge_dir() -> Path:
    """Per-user data directory. FORGE_HOME overrides ~/.forge."""
    override = os.environ.get("FORGE_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".forge"


def tasks_file() -> Path:
    return forge_dir() / "tasks.json"


def config_file() -> Path:
    return forge_dir() / "config.yaml"

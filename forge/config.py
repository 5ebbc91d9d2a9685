import ipaddress
import os
from dataclasses import dataclass
from functools import lru_cache

import yaml

from forge.errors import ConfigError
from forge.lib import paths

DEFAULTS = {
    "creator": "@user",
    "agent": "@user",
    "web_creator": "@web-user",
    "currency": "TEST",
    "host": "127.0.0.1",
    "port": 3030,
}

_STRING_KEYS = ("creator", "agent", "web_creator", "currency", "host")


@dataclass(frozen=True)
class Settings:
    creator: str
    agent: str
    web_creator: str
    currency: str
    host: str
    port: int


def _validate_config(cfg: dict) -> None:
    """Validate config structure. Fail fast on invalid types."""
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config must be a mapping, got {type(cfg).__name__}")

    for key in _STRING_KEYS:
        if key in cfg and not isinstance(cfg[key], str):
            raise ConfigError(f"Config '{key}' must be a string")

    if "port" in cfg and (not isinstance(cfg["port"], int) or isinstance(cfg["port"], bool)):
        raise ConfigError("Config 'port' must be an integer")


def _clear_cache():
    load_config.cache_clear()


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load config.yaml from the data directory, or an empty dict if not found."""
    path = paths.config_file()
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    _validate_config(cfg)
    return cfg


def check_loopback(host: str) -> str:
    """Return `host` if it names a loopback interface, else raise ConfigError.

    The API has no authentication, so it never listens beyond this machine.
    """
    if host == "localhost":
        return host
    try:
        is_loopback = ipaddress.ip_address(host).is_loopback
    except ValueError:
        is_loopback = False
    if not is_loopback:
        raise ConfigError(f"Refusing to bind to non-loopback host '{host}'")
    return host


def _env_port() -> int | None:
    raw = os.environ.get("FORGE_PORT") or os.environ.get("PORT")
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"Invalid port '{raw}'") from e


def get_settings() -> Settings:
    """Defaults, overlaid by config.yaml, overlaid by FORGE_HOST / FORGE_PORT."""
    merged = {**DEFAULTS, **load_config()}

    host = os.environ.get("FORGE_HOST")
    if host:
        merged["host"] = host
    port = _env_port()
    if port is not None:
        merged["port"] = port

    merged["host"] = check_loopback(merged["host"])
    return Settings(**{key: merged[key] for key in DEFAULTS})

import pytest

from forge import config
from forge.errors import ConfigError
from forge.lib import paths


def _write_config(text: str) -> None:
    path = paths.config_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    config._clear_cache()


def test_paths_follow_forge_home(forge_home):
    assert paths.forge_dir() == forge_home
    assert paths.tasks_file() == forge_home / "tasks.json"


def test_defaults_without_config():
    settings = config.get_settings()

    assert config.load_config() == {}
    assert settings.creator == "@user"
    assert settings.web_creator == "@web-user"
    assert settings.currency == "TEST"
    assert settings.host == "127.0.0.1"
    assert settings.port == 3030


def test_yaml_overrides_defaults():
    _write_config("creator: '@alice'\ncurrency: USD\nport: 4040\nunused: true\n")

    settings = config.get_settings()

    assert settings.creator == "@alice"
    assert settings.currency == "USD"
    assert settings.port == 4040
    assert settings.agent == "@user"


def test_env_overrides_yaml(monkeypatch):
    _write_config("port: 4040\n")
    monkeypatch.setenv("PORT", "5050")
    assert config.get_settings().port == 5050

    monkeypatch.setenv("FORGE_PORT", "6060")
    monkeypatch.setenv("FORGE_HOST", "localhost")
    settings = config.get_settings()
    assert settings.port == 6060
    assert settings.host == "localhost"


@pytest.mark.parametrize("text", ["- a\n- b\n", "port: nope\n", "creator: 5\n"])
def test_invalid_config_fails_fast(text):
    _write_config(text)

    with pytest.raises(ConfigError):
        config.load_config()


def test_invalid_env_port(monkeypatch):
    monkeypatch.setenv("FORGE_PORT", "abc")

    with pytest.raises(ConfigError, match="Invalid port"):
        config.get_settings()


@pytest.mark.parametrize("host", ["127.0.0.1", "127.0.0.2", "::1", "localhost"])
def test_loopback_hosts_accepted(host):
    assert config.check_loopback(host) == host


@pytest.mark.parametrize("host", ["0.0.0.0", "::", "192.168.1.10", "example.com", ""])
def test_non_loopback_hosts_refused(host):
    with pytest.raises(ConfigError, match="non-loopback"):
        config.check_loopback(host)


def test_env_host_must_be_loopback(monkeypatch):
    """Boundary: FORGE_HOST cannot expose the unauthenticated API."""
    monkeypatch.setenv("FORGE_HOST", "0.0.0.0")

    with pytest.raises(ConfigError, match="0.0.0.0"):
        config.get_settings()


def test_yaml_host_must_be_loopback():
    _write_config("host: 10.0.0.5\n")

    with pytest.raises(ConfigError, match="10.0.0.5"):
        config.get_settings()

from pathlib import Path

import pytest

from json_http.application.config_loader import load_config
from json_http.domain.config import ClientConfig

REPO_CONFIG = Path(__file__).resolve().parents[1] / "config" / "client.yaml"


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in ("JSON_HTTP_CONFIG", "JSON_HTTP_TIMEOUT", "JSON_HTTP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_repo_config_loads():
    cfg = load_config(REPO_CONFIG)

    assert cfg.transport.timeout == 10.0
    assert cfg.transport.headers["User-Agent"].startswith("json-http/")
    assert cfg.logging.level == "INFO"
    assert cfg.logging.file is None


def test_missing_sections_fall_back_to_defaults(tmp_path):
    path = tmp_path / "client.yaml"
    path.write_text("transport:\n  timeout: 3\n", encoding="utf-8")

    cfg = load_config(path)

    assert cfg.transport.timeout == 3.0
    assert cfg.transport.follow_redirects is False
    assert cfg.logging == ClientConfig().logging


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "client.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == ClientConfig()


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "client.yaml"
    path.write_text("transport:\n  timeout: 3\nlogging:\n  level: INFO\n", encoding="utf-8")
    monkeypatch.setenv("JSON_HTTP_TIMEOUT", "1.5")
    monkeypatch.setenv("JSON_HTTP_LOG_LEVEL", "DEBUG")

    cfg = load_config(path)

    assert cfg.transport.timeout == 1.5
    assert cfg.logging.level == "DEBUG"


def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "other.yaml"
    path.write_text("transport:\n  base_url: https://api.example.com\n", encoding="utf-8")
    monkeypatch.setenv("JSON_HTTP_CONFIG", str(path))

    assert load_config().transport.base_url == "https://api.example.com"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_demo_section_is_loaded():
    cfg = load_config(REPO_CONFIG)

    assert cfg.demo.url == "https://httpbin.org/get"
    assert cfg.demo.query == {"source": "json-http"}


def test_demo_defaults_when_absent(tmp_path):
    path = tmp_path / "client.yaml"
    path.write_text("transport:\n  timeout: 3\n", encoding="utf-8")

    demo = load_config(path).demo

    assert demo.url == ""
    assert demo.query == {}

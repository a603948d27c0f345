from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from json_http.domain.config import ClientConfig, DemoConfig, LoggingConfig, TransportConfig

DEFAULT_CONFIG_PATH = Path("config/client.yaml")


def _get_config_path() -> Path:
    """
    Resolve the config file from env, falling back to the repo default.
    """
    return Path(os.getenv("JSON_HTTP_CONFIG", str(DEFAULT_CONFIG_PATH)))


def load_config(path: str | Path | None = None) -> ClientConfig:
    """
    Load the YAML config file into a `ClientConfig`.

    Missing sections or keys keep their dataclass defaults. The
    `JSON_HTTP_TIMEOUT` and `JSON_HTTP_LOG_LEVEL` environment variables win
    over the file.
    """
    path = Path(path) if path is not None else _get_config_path()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    transport_cfg: Dict[str, Any] = raw.get("transport") or {}
    logging_cfg: Dict[str, Any] = raw.get("logging") or {}
    demo_cfg: Dict[str, Any] = raw.get("demo") or {}

    defaults = ClientConfig()
    transport = TransportConfig(
        base_url=str(transport_cfg.get("base_url") or defaults.transport.base_url),
        timeout=float(transport_cfg.get("timeout", defaults.transport.timeout)),
        follow_redirects=bool(transport_cfg.get("follow_redirects", defaults.transport.follow_redirects)),
        verify=bool(transport_cfg.get("verify", defaults.transport.verify)),
        headers={str(k): str(v) for k, v in (transport_cfg.get("headers") or {}).items()},
    )
    logging_ = LoggingConfig(
        level=str(logging_cfg.get("level", defaults.logging.level)),
        format=str(logging_cfg.get("format", defaults.logging.format)),
        file=_optional_str(logging_cfg.get("file")),
        max_size=str(logging_cfg.get("max_size", defaults.logging.max_size)),
        backup_count=int(logging_cfg.get("backup_count", defaults.logging.backup_count)),
    )
    demo = DemoConfig(
        url=str(demo_cfg.get("url") or defaults.demo.url),
        query={str(k): str(v) for k, v in (demo_cfg.get("query") or {}).items()},
    )

    if os.getenv("JSON_HTTP_TIMEOUT"):
        transport.timeout = float(os.environ["JSON_HTTP_TIMEOUT"])
    if os.getenv("JSON_HTTP_LOG_LEVEL"):
        logging_.level = os.environ["JSON_HTTP_LOG_LEVEL"]

    return ClientConfig(transport=transport, logging=logging_, demo=demo)


def _optional_str(value: Optional[Any]) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)

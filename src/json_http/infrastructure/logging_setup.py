from __future__ import annotations

import logging
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from json_http.domain.config import LoggingConfig

_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([KMG]B?)?\s*$", re.I)
_FACTORS = {"": 1, "K": 1024, "KB": 1024, "M": 1024**2, "MB": 1024**2, "G": 1024**3, "GB": 1024**3}

DEFAULT_MAX_BYTES = 10 * 1024 * 1024


def parse_size(value: Union[str, int, float], default_bytes: int = DEFAULT_MAX_BYTES) -> int:
    """
    Parse sizes such as "10MB", "512k" or 2048 into a byte count.
    """
    if isinstance(value, (int, float)):
        return max(0, int(value))

    m = _SIZE_RE.match(str(value))
    if not m:
        return default_bytes
    return int(float(m.group(1)) * _FACTORS[(m.group(2) or "").upper()])


def configure_logging(config: Optional[LoggingConfig] = None, force: bool = False) -> logging.Logger:
    root = logging.getLogger()
    if getattr(root, "_json_http_logging_configured", False) and not force:
        return root

    config = config or LoggingConfig()
    level = logging.getLevelName((config.level or "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO
    root.setLevel(level)

    formatter = logging.Formatter(config.format)

    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    root.addHandler(ch)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            str(log_path),
            maxBytes=parse_size(config.max_size),
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        fh.setFormatter(formatter)
        root.addHandler(fh)

    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    root._json_http_logging_configured = True  # type: ignore[attr-defined]
    return root


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class TransportConfig:
    """
    Settings used to build the `httpx.AsyncClient` handed to the client.

    The JSON client itself never reads these; they only matter to whoever
    constructs (and later closes) the transport.
    """

    base_url: str = ""
    timeout: float = 10.0
    follow_redirects: bool = False
    verify: bool = True
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None
    max_size: str = "10MB"
    backup_count: int = 5


@dataclass
class DemoConfig:
    """
    Target hit by `main.py`; not used by the library itself.
    """

    url: str = ""
    query: Dict[str, str] = field(default_factory=dict)


@dataclass
class ClientConfig:
    transport: TransportConfig = field(default_factory=TransportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)

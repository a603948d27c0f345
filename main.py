from __future__ import annotations

import asyncio
import sys
from pathlib import Path


async def _run(config_path: Path) -> None:
    from json_http.application.config_loader import load_config
    from json_http.infrastructure.http_client import JsonRequestClient
    from json_http.infrastructure.logging_setup import configure_logging, get_logger
    from json_http.infrastructure.transport import build_transport

    config = load_config(config_path)
    configure_logging(config.logging)
    log = get_logger("json_http.demo")

    url = config.demo.url
    query = config.demo.query

    async with build_transport(config.transport) as transport:
        client = JsonRequestClient(transport)
        result = await client.get(url, dict, query=query or None)

    if result is None:
        log.warning("No result from %s", url)
        return
    log.info("Got %d top-level keys from %s", len(result), url)
    for key, value in result.items():
        print(f"  {key}: {value}")


def main() -> None:
    """
    Small script that:
      - wires up `src/` on sys.path
      - loads `config/client.yaml`
      - issues one GET through JsonRequestClient and prints the decoded JSON
    """
    project_root = Path(__file__).resolve().parent
    src_path = project_root / "src"

    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))

    asyncio.run(_run(project_root / "config" / "client.yaml"))


if __name__ == "__main__":
    main()

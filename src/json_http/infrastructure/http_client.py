from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import TypeAdapter

from json_http.domain.schemas import JsonRequest, JsonResponse, Pairs, as_pairs

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

_BODY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)

logger = logging.getLogger(__name__)


def format_query(url: str, query: Optional[Pairs]) -> str:
    """
    Append `key=value` pairs to `url`, joined by `&`.

    Values are written as given: nothing is percent-encoded here, so callers
    must pre-encode anything containing reserved characters.
    """
    pairs = as_pairs(query)
    if not pairs:
        return url

    separator = "&" if "?" in url else "?"
    return url + separator + "&".join(f"{key}={value}" for key, value in pairs)


def _require_url(url: Optional[str]) -> str:
    if not url:
        raise ValueError("url must be a non-empty string")
    return url


@dataclass
class JsonRequestClient:
    """
    Thin JSON façade over an `httpx.AsyncClient`.

    The transport is borrowed: it is created and closed by the caller, and
    everything about connections, TLS, proxies and timeouts is its concern.
    Each call is one independent request/response exchange with no retries.

    `get` and `post` return `None` for any status other than 200. Use `send`
    when the status code and raw body are needed.
    """

    transport: httpx.AsyncClient

    async def get(
        self,
        url: str,
        result_type: Type[T] = Any,  # type: ignore[assignment]
        *,
        query: Optional[Pairs] = None,
        token: Optional[str] = None,
        headers: Optional[Pairs] = None,
    ) -> Optional[T]:
        request = JsonRequest(
            method="GET",
            url=_require_url(url),
            query=query,
            token=token,
            headers=headers,
        )
        return await self._fetch(request, result_type)

    async def post(
        self,
        url: str,
        body: Any = None,
        result_type: Type[T] = Any,  # type: ignore[assignment]
        *,
        token: Optional[str] = None,
        headers: Optional[Pairs] = None,
    ) -> Optional[T]:
        """
        POST `body` as JSON and decode a 200 response into `result_type`.

        Passing `headers` selects the strict variant, which requires a body.
        """
        request = JsonRequest(
            method="POST",
            url=_require_url(url),
            body=body,
            token=token,
            headers=headers,
            require_body=headers is not None,
        )
        return await self._fetch(request, result_type)

    async def send(self, request: JsonRequest) -> JsonResponse:
        http_request = self.build_request(request)
        logger.debug("HTTP %s %s", http_request.method, http_request.url)

        response = await self.transport.send(http_request)
        return JsonResponse(status_code=response.status_code, body=response.text)

    def build_request(self, request: JsonRequest) -> httpx.Request:
        """
        Turn a `JsonRequest` into an `httpx.Request` without any I/O.

        Raises `ValueError` for an empty URL, or for a missing body when the
        request demands one.
        """
        url = _require_url(request.url)
        if request.require_body and request.body is None:
            raise ValueError("body is required when headers are supplied")

        header_pairs: List[Tuple[str, str]] = list(request.headers or [])
        if request.token:
            # The bearer token replaces any Authorization entry from `headers`.
            header_pairs = [(k, v) for k, v in header_pairs if k.lower() != "authorization"]
            header_pairs.append(("Authorization", f"Bearer {request.token}"))

        content: Optional[bytes] = None
        if request.body is not None:
            content = _BODY_ADAPTER.dump_json(request.body)
            if not any(key.lower() == "content-type" for key, _ in header_pairs):
                header_pairs.insert(0, ("Content-Type", JSON_CONTENT_TYPE))

        return self.transport.build_request(
            request.method,
            format_query(url, request.query),
            headers=header_pairs,
            content=content,
        )

    async def _fetch(self, request: JsonRequest, result_type: Type[T]) -> Optional[T]:
        response = await self.send(request)
        if not response.ok:
            logger.warning(
                "HTTP %s %s returned %s; no result", request.method, request.url, response.status_code
            )
            return None

        # An empty or `null` 200 body is "successfully empty".
        if not response.body.strip():
            return None
        return TypeAdapter(Optional[result_type]).validate_json(response.body)

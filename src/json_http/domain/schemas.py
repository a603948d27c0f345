from __future__ import annotations

from typing import Any, List, Literal, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, field_validator

# Query parameters and headers may be given as a mapping or as a sequence of
# (key, value) pairs; the latter keeps duplicate keys.
Pairs = Union[Mapping[str, str], Sequence[Tuple[str, str]]]


def as_pairs(value: Optional[Pairs]) -> List[Tuple[str, str]]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return [(str(k), str(v)) for k, v in value.items()]
    return [(str(k), str(v)) for k, v in value]


class JsonRequest(BaseModel):
    """
    Description of a single JSON request.

    `query`, `headers`, `token` and `body` are independent of each other;
    any combination may be supplied. `require_body` marks the headers
    variant of POST, which refuses to go out without a payload.
    """

    method: Literal["GET", "POST"]
    url: str
    query: Optional[List[Tuple[str, str]]] = None
    headers: Optional[List[Tuple[str, str]]] = None
    token: Optional[str] = None
    body: Any = None
    require_body: bool = False

    @field_validator("query", "headers", mode="before")
    @classmethod
    def _normalize_pairs(cls, value: Any) -> Optional[List[Tuple[str, str]]]:
        if value is None:
            return None
        return as_pairs(value)


class JsonResponse(BaseModel):
    """
    Status code and raw body of a completed exchange.
    """

    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        # Only a plain 200 counts; 201/204 and friends are treated as "no result".
        return self.status_code == 200

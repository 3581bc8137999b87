from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .codec import TEXT_CONTENT_TYPE


@dataclass(frozen=True)
class ApiRequest:
    method: Optional[str]
    query_parameters: Optional[Dict[str, str]] = None

    @classmethod
    def from_event(cls, event: Any) -> Optional["ApiRequest"]:
        """Build a request from an API Gateway proxy event.

        Handles both REST API (``httpMethod``) and HTTP API v2
        (``requestContext.http.method``) payloads. Returns None when there is
        no usable event at all.
        """
        if not isinstance(event, Mapping):
            return None
        method = event.get("httpMethod")
        if method is None:
            http = _mapping(_mapping(event.get("requestContext")).get("http"))
            method = http.get("method")
        query = event.get("queryStringParameters")
        if query is not None and not isinstance(query, Mapping):
            raise ValueError(f"queryStringParameters must be a mapping, got {type(query).__name__}")
        return cls(method=method, query_parameters=dict(query) if query is not None else None)


def _mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


@dataclass(frozen=True)
class Response:
    status_code: int
    body: str
    headers: Dict[str, str] = field(default_factory=lambda: {"Content-Type": TEXT_CONTENT_TYPE})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }

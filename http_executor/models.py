"""
Request/response shapes passed between the executor, the client and callers.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, method: str) -> "HttpMethod":
        """Resolve a verb name case-insensitively, raising ValueError on unknown verbs."""
        try:
            return cls(method.strip().upper())
        except ValueError:
            raise ValueError(f"Unsupported HTTP method: {method!r}") from None


@dataclass
class FormData:
    """Form upload body, encoded by the client library.

    Goes out as multipart/form-data (with a boundary the library picks) when
    `files` is non-empty, and as application/x-www-form-urlencoded otherwise.
    """

    fields: Dict[str, Any] = field(default_factory=dict)
    files: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Callbacks:
    response: Callable[[Any], Any]
    error: Optional[Callable[[Any], Any]] = None


@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    url: str
    on: Callbacks
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None


@dataclass(frozen=True)
class ExecutionOptions:
    client: Any = None
    transport: Optional[Callable[[Any, RequestDescriptor], Any]] = None
    response_interceptor: Optional[Callable[[Any], Any]] = None


@dataclass
class ClientResponse:
    """Raw response as seen by the normalizer.

    `body` holds a body the client already parsed, `error` a response-level
    error flag (e.g. an HTTP 4xx/5xx status).
    """

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    text: str = ""
    body: Any = None
    error: Optional[BaseException] = None


@dataclass(frozen=True)
class NormalizedResponse:
    url: str
    method: str
    headers: Mapping[str, str]
    obj: Any
    status: int
    status_text: str

    @property
    def data(self) -> str:
        return self.status_text

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict view, with the error rendered as text on the error path."""
        obj = self.obj
        if isinstance(obj, BaseException):
            obj = str(obj)
        else:
            try:
                json.dumps(obj)
            except (TypeError, ValueError):
                obj = repr(obj)
        return {
            'url': self.url,
            'method': self.method,
            'headers': dict(self.headers),
            'obj': obj,
            'status': self.status,
            'status_text': self.status_text,
            'data': self.data,
        }

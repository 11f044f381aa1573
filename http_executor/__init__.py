"""
Single-request HTTP executor: issues one request through httpx, normalizes the
response and reports it to a success or error callback.
"""

from .client import BufferedResponse, DefaultHttpClient, HttpClient, normalize_response
from .executor import RequestExecutor, default_transport, execute
from .models import (
    Callbacks,
    ClientResponse,
    ExecutionOptions,
    FormData,
    HttpMethod,
    NormalizedResponse,
    RequestDescriptor,
)

__all__ = [
    "BufferedResponse",
    "Callbacks",
    "ClientResponse",
    "DefaultHttpClient",
    "ExecutionOptions",
    "FormData",
    "HttpClient",
    "HttpMethod",
    "NormalizedResponse",
    "RequestDescriptor",
    "RequestExecutor",
    "default_transport",
    "execute",
    "normalize_response",
]

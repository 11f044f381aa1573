"""
RequestExecutor: prepares a request descriptor and hands it, together with a
client, to a transport function.
"""

import json
from dataclasses import replace
from typing import Any, Callable, Mapping, Optional

from .client import DefaultHttpClient, HttpClient
from .config import Config
from .models import Callbacks, ExecutionOptions, FormData, RequestDescriptor


def default_transport(client: HttpClient, request: RequestDescriptor) -> Any:
    """Run the request on the client and hand back whatever it returns."""
    if not isinstance(client, HttpClient):
        raise TypeError(f"{type(client).__name__} does not provide execute()")
    return client.execute(request)


def compose_callbacks(on: Callbacks, interceptor: Optional[Callable[[Any], Any]]) -> Callbacks:
    """Route the success callback through the interceptor, if one is given."""
    if interceptor is None:
        return on

    success = on.response

    def intercepted(response):
        return success(interceptor(response))

    return Callbacks(response=intercepted, error=on.error)


def prepare_body(request: RequestDescriptor) -> RequestDescriptor:
    """Serialize structured bodies to JSON; leave multipart bodies to the client.

    Multipart bodies drop any explicit Content-Type so the client library can
    set one carrying its own boundary.
    """
    body = request.body
    headers = dict(request.headers or {})

    if isinstance(body, FormData):
        headers = {name: value for name, value in headers.items() if name.lower() != 'content-type'}
        return replace(request, headers=headers)

    if isinstance(body, (Mapping, list, tuple)):
        return replace(request, headers=headers, body=json.dumps(body))

    return replace(request, headers=headers)


class RequestExecutor:
    def __init__(self, cfg: Config = None):
        self.cfg = cfg

    def execute(self, request: RequestDescriptor, options: ExecutionOptions = None) -> Any:
        """Execute a single request.

        Args:
            request: Request descriptor; it is never modified
            options: Client, transport function and response interceptor overrides

        Returns:
            Whatever the transport function returns. With the default transport
            and client this is a coroutine; awaiting it performs the request,
            whose outcome arrives through the descriptor's callbacks.
        """
        options = options or ExecutionOptions()
        if request.on is None or request.on.response is None:
            raise ValueError("request descriptor needs an on.response callback")

        client = options.client if options.client is not None else DefaultHttpClient(self.cfg)

        prepared = replace(request, on=compose_callbacks(request.on, options.response_interceptor))
        prepared = prepare_body(prepared)

        transport = options.transport or default_transport
        return transport(client, prepared)


def execute(request: RequestDescriptor, options: ExecutionOptions = None) -> Any:
    """Execute a request with a fresh RequestExecutor and the global config."""
    return RequestExecutor().execute(request, options)

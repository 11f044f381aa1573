"""
Default HTTP client: sends one request through httpx and reports the
outcome to the request's callbacks as a NormalizedResponse.
"""

import inspect
from typing import Any, Callable, Optional, Protocol, Tuple, runtime_checkable

import httpx
import structlog

from .config import Config, config as default_config
from .content_types import parse_response_body
from .models import (
    ClientResponse,
    FormData,
    HttpMethod,
    NormalizedResponse,
    RequestDescriptor,
)

logger = structlog.get_logger(__name__)

NO_RESPONSE_HEADERS = {'error': 'no response from server'}


@runtime_checkable
class HttpClient(Protocol):
    def execute(self, request: RequestDescriptor) -> Any:
        ...


@runtime_checkable
class BufferedResponse(Protocol):
    """Response that can be forced to read its whole body into memory."""

    async def aread(self) -> bytes:
        ...


def normalize_response(
    request: RequestDescriptor,
    err: Optional[BaseException],
    res: Optional[ClientResponse],
) -> Tuple[Optional[Callable[[Any], Any]], NormalizedResponse]:
    """Pick the callback for a completed request and build its response.

    Args:
        request: The descriptor the request was issued from
        err: Transport error, if the request failed
        res: Response received, or None when nothing came back

    Returns:
        (callback, response). The callback is None only when the descriptor
        carries no callback for the chosen path.
    """
    received = res is not None
    if res is None:
        res = ClientResponse(status=0, headers=dict(NO_RESPONSE_HEADERS))

    if err is None and res.error is not None:
        err = res.error

    on = request.on

    if err is not None and on is not None and on.error is not None:
        response = NormalizedResponse(
            url=request.url,
            method=request.method,
            headers=res.headers,
            obj=err,
            status=res.status if received else 500,
            status_text=res.text if received else str(err),
        )
        return on.error, response

    response = NormalizedResponse(
        url=request.url,
        method=request.method,
        headers=res.headers,
        obj=parse_response_body(res.headers, res.text, res.body),
        status=res.status,
        status_text=res.text,
    )
    return (on.response if on is not None else None), response


class DefaultHttpClient:
    """httpx-backed client. Each request gets its own AsyncClient; nothing is shared across calls."""

    def __init__(self, cfg: Config = None, http_transport: httpx.AsyncBaseTransport = None):
        http_config = (cfg or default_config).http
        self.user_agent = http_config.get('user_agent', 'http-executor/0.1')
        self.follow_redirects = http_config.get('follow_redirects', True)
        self.verify = http_config.get('verify_ssl', True)
        self.http_transport = http_transport

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=None,
            follow_redirects=self.follow_redirects,
            verify=self.verify,
            headers={'User-Agent': self.user_agent},
            transport=self.http_transport,
        )

    def _body_arguments(self, body: Any) -> dict:
        """Map a prepared body onto httpx request arguments."""
        if not body:
            return {}
        if isinstance(body, FormData):
            return {'data': body.fields, 'files': body.files or None}
        if isinstance(body, (str, bytes)):
            return {'content': body}
        return {'content': str(body)}

    async def execute(self, request: RequestDescriptor):
        """Send the request and invoke exactly one of its callbacks."""
        method = HttpMethod.parse(request.method)
        err = None
        res = None

        logger.debug("sending request", method=method.value, url=request.url)

        async with self._create_client() as client:
            http_request = client.build_request(
                method.value,
                request.url,
                headers=dict(request.headers or {}),
                **self._body_arguments(request.body)
            )
            try:
                response = await client.send(http_request, stream=True)
                try:
                    if isinstance(response, BufferedResponse):
                        await response.aread()
                    res = self._to_client_response(response)
                finally:
                    await response.aclose()
            except httpx.HTTPError as e:
                err = e
                logger.warning("request failed", method=method.value, url=request.url, error=str(e))

        callback, normalized = normalize_response(request, err, res)
        logger.debug("request completed", url=request.url, status=normalized.status)

        if callback is not None:
            result = callback(normalized)
            if inspect.isawaitable(result):
                await result

    def _to_client_response(self, response: httpx.Response) -> ClientResponse:
        error = None
        if response.is_error:
            try:
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                error = e

        return ClientResponse(
            status=response.status_code,
            headers=dict(response.headers),
            text=response.text,
            error=error,
        )

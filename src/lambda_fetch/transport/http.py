"""
Outbound HTTP(S) dispatch over httpx.

A client is built for each call and closed before returning, so nothing is
shared between invocations.
"""

import asyncio
import logging
from typing import Optional

import httpx

from lambda_fetch.config import Settings
from lambda_fetch.errors import FetchTimeout, MalformedUri, TransportError
from lambda_fetch.fanout import try_join
from lambda_fetch.models.request import ValidatedUri
from lambda_fetch.models.response import FetchResult
from lambda_fetch.transport.transcode import read_body, stringify_headers

logger = logging.getLogger(__name__)


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


def build_client(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.timeout,
        verify=settings.verify_tls,
        follow_redirects=False,
        transport=transport,
    )


async def fetch_uri(
    headers: httpx.Headers,
    uri: ValidatedUri,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FetchResult:
    """GET ``uri`` with exactly ``headers`` and transcode the response."""
    # Built directly rather than via the client so httpx's default headers are not added.
    try:
        request = httpx.Request("GET", str(uri), headers=headers)
    except httpx.InvalidURL as exc:
        raise MalformedUri(f"invalid uri: {exc}", uri=str(uri)) from exc

    async with build_client(settings, transport) as client:
        try:
            response = await client.send(request, stream=True)
        except httpx.TimeoutException as exc:
            raise FetchTimeout(f"request to {uri} timed out: {_describe(exc)}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"request to {uri} failed: {_describe(exc)}") from exc

        try:
            if not 100 <= response.status_code <= 599:
                raise TransportError(f"invalid status code {response.status_code} from {uri}")
            response_headers, body = await try_join(
                asyncio.to_thread(stringify_headers, response.headers.raw),
                read_body(response),
            )
        finally:
            await response.aclose()

    logger.debug("response received", extra={"status": response.status_code, "headers": list(response_headers)})
    return FetchResult(status=response.status_code, headers=response_headers, body=body)

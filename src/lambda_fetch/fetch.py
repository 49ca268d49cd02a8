"""
Fetch orchestrator — validate the request, go get it, return the result.
"""

import asyncio
import logging
from typing import Optional

import httpx

from lambda_fetch.config import Settings
from lambda_fetch.errors import FetchTimeout
from lambda_fetch.fanout import try_join
from lambda_fetch.models.request import Request
from lambda_fetch.models.response import FetchResult
from lambda_fetch.transport.http import fetch_uri
from lambda_fetch.validation.headers import validate_headers
from lambda_fetch.validation.uri import validate_uri

logger = logging.getLogger(__name__)


async def fetch(
    request: Request,
    settings: Optional[Settings] = None,
    deadline: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FetchResult:
    """Validate ``request``, GET its URI and return the transcoded response.

    ``deadline`` bounds the whole call in seconds; when it runs out the
    in-flight request is cancelled and ``FetchTimeout`` is raised.
    """
    settings = settings or Settings()
    if deadline is None:
        return await _fetch(request, settings, transport)
    try:
        return await asyncio.wait_for(_fetch(request, settings, transport), timeout=deadline)
    except asyncio.TimeoutError as exc:
        raise FetchTimeout(f"invocation deadline of {deadline:.3f}s exceeded") from exc


async def _fetch(request: Request, settings: Settings, transport: Optional[httpx.AsyncBaseTransport]) -> FetchResult:
    uri, headers = await try_join(
        asyncio.to_thread(validate_uri, request.uri),
        asyncio.to_thread(validate_headers, request.headers),
    )
    logger.info("fetching uri", extra={"uri": str(uri), "headers": list(headers.keys())})
    return await fetch_uri(headers, uri, settings, transport=transport)

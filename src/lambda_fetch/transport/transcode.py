"""
Response transcoding — turn transport response headers into plain strings
and the response body into base64 text.
"""

import base64
from collections.abc import Iterable

import httpx

from lambda_fetch.errors import BodyReadError, FetchTimeout, HeaderEncodingError
from lambda_fetch.validation.headers import FIELD_VALUE_RE


def stringify_headers(raw_headers: Iterable[tuple[bytes, bytes]]) -> dict[str, str]:
    """Convert raw response headers to a map of lower-cased name to value.

    A repeated header name keeps its last value.
    """
    headers: dict[str, str] = {}
    for raw_name, raw_value in raw_headers:
        name = raw_name.decode("latin-1").lower()
        try:
            value = raw_value.decode("ascii")
        except UnicodeDecodeError as exc:
            raise HeaderEncodingError(name) from exc
        if not FIELD_VALUE_RE.fullmatch(value):
            raise HeaderEncodingError(name)
        headers[name] = value
    return headers


async def read_body(response: httpx.Response) -> str:
    """Drain the response stream and base64 encode the bytes as received."""
    chunks: list[bytes] = []
    try:
        async for chunk in response.aiter_raw():
            chunks.append(chunk)
    except httpx.TimeoutException as exc:
        raise FetchTimeout(f"timed out reading response body: {exc}") from exc
    except (httpx.HTTPError, httpx.StreamError) as exc:
        raise BodyReadError(f"failed to read response body: {exc}") from exc
    return base64.b64encode(b"".join(chunks)).decode("ascii")

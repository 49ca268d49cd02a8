"""
URI validation — parse a candidate URI with httpx's RFC 3986 parser and accept
it only in absolute form (scheme plus non-empty authority).
"""

import logging
import re

import httpx

from lambda_fetch.errors import EmptyScheme, MalformedUri
from lambda_fetch.models.request import ValidatedUri

logger = logging.getLogger(__name__)

# RFC 3986 2.2/2.3: unreserved, reserved and the percent sign. httpx would
# quote anything else silently.
URI_CHARS_RE = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
BAD_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
MAX_PORT = 65535


def _malformed(reason: str, raw: str) -> MalformedUri:
    logger.warning("malformed URI", extra={"uri": raw, "reason": reason})
    return MalformedUri(f"invalid uri: {reason}", uri=raw)


def validate_uri(raw: str) -> ValidatedUri:
    """Parse and validate ``raw``.

    Raises ``MalformedUri`` when the string is not a URI at all, is opaque
    (``mailto:...``) or has an empty authority (``file:///...``), and
    ``EmptyScheme`` when it parses but carries no scheme.
    """
    if not raw:
        raise _malformed("empty string", raw)
    if not URI_CHARS_RE.fullmatch(raw):
        raise _malformed("illegal character", raw)
    if BAD_PERCENT_RE.search(raw):
        raise _malformed("invalid percent-encoding", raw)
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as exc:
        raise _malformed(str(exc), raw) from exc

    if not url.scheme:
        logger.warning("empty scheme for URI", extra={"uri": raw})
        raise EmptyScheme(uri=raw)
    if not url.host:
        raise _malformed("missing or empty authority", raw)
    if url.port is not None and url.port > MAX_PORT:
        raise _malformed(f"port {url.port} out of range", raw)

    authority = url.netloc
    if url.userinfo:
        authority = url.userinfo + b"@" + authority
    path, _, _ = url.raw_path.partition(b"?")
    # httpx hands the fragment back decoded; take it from the input as written.
    _, _, fragment = raw.partition("#")
    uri = ValidatedUri(
        scheme=url.scheme,
        authority=authority.decode("ascii"),
        path=path.decode("ascii") or "/",
        query=url.query.decode("ascii"),
        fragment=fragment,
    )
    logger.debug("uri validated", extra={"uri": str(uri)})
    return uri

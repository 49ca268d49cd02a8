"""
Request header validation — check every name against the HTTP token grammar
and every value against the field-value grammar, then collect them into
``httpx.Headers``.
"""

import logging
import re
from collections.abc import Mapping

import httpx

from lambda_fetch.errors import InvalidHeaderName, InvalidHeaderValue

logger = logging.getLogger(__name__)

# RFC 9110 5.1: token = 1*tchar
TOKEN_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
# Visible ASCII, space and horizontal tab. obs-text is refused.
FIELD_VALUE_RE = re.compile(r"[\t\x20-\x7e]*")


def validate_headers(raw: Mapping[str, str]) -> httpx.Headers:
    """Validate ``raw`` and return it as a multi-valued header collection.

    Leading whitespace is stripped from each value before it is checked.
    Names differing only in case become separate entries. Fails fast on the
    first invalid pair.
    """
    pairs: list[tuple[str, str]] = []
    for name, value in raw.items():
        if not TOKEN_RE.fullmatch(name):
            logger.warning("invalid header name", extra={"header": name})
            raise InvalidHeaderName(name)
        value = value.lstrip()
        if not FIELD_VALUE_RE.fullmatch(value):
            logger.warning("invalid header value", extra={"header": name})
            raise InvalidHeaderValue(name)
        pairs.append((name, value))

    headers = httpx.Headers(pairs)
    logger.debug("request headers validated", extra={"headers": list(headers.keys())})
    return headers

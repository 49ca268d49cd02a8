"""
lambda-fetch — fetch an HTTP(S) URI on a caller's behalf.

Validates a URI and a set of request headers, GETs the URI over httpx and
returns the status, the headers as strings and the body as base64.
"""

from lambda_fetch.config import Settings
from lambda_fetch.errors import (
    BodyReadError,
    EmptyScheme,
    FetchTimeout,
    HeaderEncodingError,
    HeaderError,
    InvalidHeaderName,
    InvalidHeaderValue,
    InvalidRequest,
    LambdaFetchError,
    MalformedUri,
    TransportError,
    URIError,
)
from lambda_fetch.fetch import fetch
from lambda_fetch.models import FetchResult, Request, ValidatedUri
from lambda_fetch.validation import validate_headers, validate_uri

__version__ = "0.1.0"
__all__ = [
    "fetch",
    "validate_headers",
    "validate_uri",
    "Settings",
    "Request",
    "FetchResult",
    "ValidatedUri",
    "LambdaFetchError",
    "InvalidRequest",
    "URIError",
    "MalformedUri",
    "EmptyScheme",
    "HeaderError",
    "InvalidHeaderName",
    "InvalidHeaderValue",
    "TransportError",
    "FetchTimeout",
    "HeaderEncodingError",
    "BodyReadError",
]

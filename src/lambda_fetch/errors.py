"""
lambda-fetch error types — one class per failure kind of the fetch pipeline.

Every third-party exception is translated into one of these where it is
raised, so callers never have to catch an httpx or pydantic type.
"""

from typing import Any, Optional


class LambdaFetchError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class InvalidRequest(LambdaFetchError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("invalid_request", message, details)


class URIError(LambdaFetchError):
    """Base for failures of the URI validation stage."""


class MalformedUri(URIError):
    def __init__(self, message: str, uri: Optional[str] = None):
        super().__init__("malformed_uri", message, {"stage": "uri", "uri": uri})


class EmptyScheme(URIError):
    def __init__(self, uri: Optional[str] = None):
        super().__init__("empty_scheme", "empty scheme", {"stage": "uri", "uri": uri})


class HeaderError(LambdaFetchError):
    """Base for failures of the request header validation stage."""


class InvalidHeaderName(HeaderError):
    def __init__(self, name: str):
        super().__init__("invalid_header_name", "invalid HTTP header name", {"stage": "headers", "name": name})


class InvalidHeaderValue(HeaderError):
    def __init__(self, name: str):
        super().__init__(
            "invalid_header_value",
            f"failed to parse header value for {name!r}",
            {"stage": "headers", "name": name},
        )


class TransportError(LambdaFetchError):
    def __init__(self, message: str, code: str = "transport_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, {"stage": "transport", **(details or {})})


class FetchTimeout(TransportError):
    def __init__(self, message: str = "request timed out"):
        super().__init__(message, code="timeout")


class HeaderEncodingError(LambdaFetchError):
    def __init__(self, name: str):
        super().__init__(
            "header_encoding_error",
            f"failed to convert header {name!r} to a string",
            {"stage": "response_headers", "name": name},
        )


class BodyReadError(LambdaFetchError):
    def __init__(self, message: str):
        super().__init__("body_read_error", message, {"stage": "body"})

from lambda_fetch.validation.headers import validate_headers
from lambda_fetch.validation.uri import validate_uri

__all__ = ["validate_headers", "validate_uri"]

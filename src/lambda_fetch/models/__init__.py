from lambda_fetch.models.envelope import FailureEnvelope, SuccessEnvelope
from lambda_fetch.models.request import Request, ValidatedUri
from lambda_fetch.models.response import FetchResult

__all__ = [
    "FailureEnvelope",
    "FetchResult",
    "Request",
    "SuccessEnvelope",
    "ValidatedUri",
]

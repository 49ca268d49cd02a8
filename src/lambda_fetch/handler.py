"""
AWS Lambda adapter — wraps ``fetch`` so every response carries the invocation's
request id.

Deploy with the handler string ``lambda_fetch.handler.handler``.
"""

import asyncio
import logging
import time
import uuid
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from lambda_fetch.config import Settings
from lambda_fetch.errors import InvalidRequest, LambdaFetchError
from lambda_fetch.fetch import fetch
from lambda_fetch.log import configure_logging
from lambda_fetch.models.envelope import FailureEnvelope, SuccessEnvelope
from lambda_fetch.models.request import Request

logger = logging.getLogger(__name__)


class FailureResponse(Exception):
    """Raised out of the handler so the runtime marks the invocation as failed."""

    def __init__(self, req_id: str, message: str):
        super().__init__(message)
        self.req_id = req_id
        self.message = message

    def to_envelope(self) -> FailureEnvelope:
        return FailureEnvelope(req_id=self.req_id, message=self.message)


class LocalContext:
    """Stand-in for the Lambda context object when invoking outside AWS."""

    def __init__(self, timeout: float = 60.0, aws_request_id: Optional[str] = None):
        self.aws_request_id = aws_request_id or str(uuid.uuid4())
        self._deadline = time.monotonic() + timeout

    def get_remaining_time_in_millis(self) -> int:
        return max(int((self._deadline - time.monotonic()) * 1000), 0)


class FetchHandler:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    def __call__(self, event: Any, context: Any) -> dict[str, Any]:
        return asyncio.run(self.handle(event, context)).model_dump()

    def _deadline(self, context: Any) -> Optional[float]:
        remaining = getattr(context, "get_remaining_time_in_millis", None)
        if remaining is None:
            return None
        return max(remaining() / 1000 - self.settings.deadline_margin, 0.0)

    async def handle(self, event: Any, context: Any) -> SuccessEnvelope:
        req_id = getattr(context, "aws_request_id", "")
        logger.debug("lambda event request", extra={"req_id": req_id, "event": event})

        try:
            request = Request.model_validate(event)
            result = await fetch(
                request,
                settings=self.settings,
                deadline=self._deadline(context),
                transport=self._transport,
            )
        except ValidationError as exc:
            error = InvalidRequest(f"invalid request event: {exc.error_count()} validation error(s)", {"errors": exc.errors()})
            logger.error("something went wrong", extra={"req_id": req_id, "code": error.code})
            raise FailureResponse(req_id, error.message) from exc
        except LambdaFetchError as exc:
            logger.error("something went wrong", extra={"req_id": req_id, "code": exc.code, "error": exc.message})
            raise FailureResponse(req_id, exc.message) from exc

        logger.debug("success", extra={"req_id": req_id, "status": result.status})
        return SuccessEnvelope(req_id=req_id, status=result.status, headers=result.headers, body=result.body)


_handler: Optional[FetchHandler] = None


def handler(event: Any, context: Any) -> dict[str, Any]:
    """Lambda entry point. Settings and logging are set up on the first (cold) invocation."""
    global _handler
    if _handler is None:
        settings = Settings.from_env()
        configure_logging(settings.log_level)
        _handler = FetchHandler(settings)
    return _handler(event, context)

"""
Lambda response envelopes — the request id of the invocation plus either the
fetched response or the failure message.
"""

from pydantic import BaseModel


class SuccessEnvelope(BaseModel):
    req_id: str
    status: int
    headers: dict[str, str]
    body: str


class FailureEnvelope(BaseModel):
    req_id: str
    message: str

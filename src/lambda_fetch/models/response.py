"""
FetchResult — the normalized response handed back to the caller.
"""

from pydantic import BaseModel, ConfigDict, Field


class FetchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: int = Field(ge=100, le=599)
    headers: dict[str, str]
    body: str  # base64 of the raw response bytes

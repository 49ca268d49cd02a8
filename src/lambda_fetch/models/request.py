"""
Request models — what the caller asks for, and the URI once it has been checked.
"""

from pydantic import BaseModel, ConfigDict, Field


class Request(BaseModel):
    """Inbound fetch request: a target URI and the headers to send with it."""

    model_config = ConfigDict(frozen=True)

    headers: dict[str, str] = Field(default_factory=dict)
    uri: str


class ValidatedUri(BaseModel):
    """An absolute URI with a scheme and a non-empty authority."""

    model_config = ConfigDict(frozen=True)

    scheme: str = Field(min_length=1)
    authority: str = Field(min_length=1)
    path: str = "/"
    query: str = ""
    fragment: str = ""

    def __str__(self) -> str:
        uri = f"{self.scheme}://{self.authority}{self.path}"
        if self.query:
            uri += f"?{self.query}"
        if self.fragment:
            uri += f"#{self.fragment}"
        return uri

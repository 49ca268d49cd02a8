"""
Integration tests for lambda-fetch — real requests against the public internet.

Run: LAMBDA_FETCH_INTEGRATION=1 pytest tests/integration/ -v
"""

import base64
import os

import pytest

from lambda_fetch import FetchTimeout, Request, Settings, TransportError, fetch

SKIP = not os.environ.get("LAMBDA_FETCH_INTEGRATION")

pytestmark = pytest.mark.skipif(SKIP, reason="LAMBDA_FETCH_INTEGRATION not set")


class TestLiveFetch:
    @pytest.mark.asyncio
    async def test_https_example_org(self):
        result = await fetch(Request(uri="https://example.org", headers={"User-Agent": "lambda-fetch-integration"}))
        assert result.status == 200
        assert result.headers["content-type"].startswith("text/html")
        assert b"Example Domain" in base64.b64decode(result.body)

    @pytest.mark.asyncio
    async def test_plain_http(self):
        result = await fetch(Request(uri="http://example.org"))
        assert 200 <= result.status < 400

    @pytest.mark.asyncio
    async def test_unresolvable_host(self):
        with pytest.raises(TransportError):
            await fetch(Request(uri="https://nonexistent.invalid"), settings=Settings(timeout=10.0))

    @pytest.mark.asyncio
    async def test_tiny_deadline(self):
        with pytest.raises(FetchTimeout):
            await fetch(Request(uri="https://example.org"), deadline=0.001)

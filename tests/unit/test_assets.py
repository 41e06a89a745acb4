"""Unit tests for badge fetching (filesystem and HTTP via httpx MockTransport)."""

import asyncio

import httpx
import pytest

from resumekit.contexts.exporting.assets import PACKAGED_BADGE_PATH, fetch_badge, is_remote
from resumekit.contexts.exporting.exceptions import AssetFetchError

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
BADGE_URL = "https://assets.example.com/badge.png"


def _fetch_with_transport(handler):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await fetch_badge(BADGE_URL, client=client)

    return asyncio.run(run())


@pytest.mark.unit
@pytest.mark.parametrize(
    "location, expected",
    [
        ("https://assets.example.com/badge.png", True),
        ("http://localhost/badge.png", True),
        ("resumekit/assets/badge.png", False),
        ("/tmp/https_badge.png", False),
    ],
)
def test_is_remote(location, expected):
    assert is_remote(location) == expected


@pytest.mark.unit
def test_packaged_badge_is_png():
    assert PACKAGED_BADGE_PATH.exists()
    assert asyncio.run(fetch_badge(PACKAGED_BADGE_PATH)).startswith(PNG_SIGNATURE)


@pytest.mark.unit
def test_missing_local_badge_raises(tmp_path):
    missing = tmp_path / "missing.png"

    with pytest.raises(AssetFetchError) as exc_info:
        asyncio.run(fetch_badge(missing))

    assert exc_info.value.location == str(missing)
    assert isinstance(exc_info.value.original_error, OSError)


@pytest.mark.unit
def test_remote_badge_returns_body():
    def handler(request):
        assert request.url == BADGE_URL
        return httpx.Response(200, content=PNG_SIGNATURE + b"rest")

    assert _fetch_with_transport(handler) == PNG_SIGNATURE + b"rest"


@pytest.mark.unit
def test_remote_badge_non_2xx_raises():
    def handler(request):
        return httpx.Response(404)

    with pytest.raises(AssetFetchError) as exc_info:
        _fetch_with_transport(handler)

    assert isinstance(exc_info.value.original_error, httpx.HTTPStatusError)
    assert BADGE_URL in str(exc_info.value)


@pytest.mark.unit
def test_remote_badge_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AssetFetchError):
        _fetch_with_transport(handler)

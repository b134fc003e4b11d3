"""Tests for GitHub release lookups."""

import aiohttp
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from setup_geth.errors import FetchError
from setup_geth.versions.release_index import ReleaseIndex


def mock_client(cls, payload=None, error=None):
    client = MagicMock()
    client.get = AsyncMock(return_value=payload, side_effect=error)
    cls.return_value.__aenter__.return_value = client
    return client


def test_token_is_sent_as_bearer():
    index = ReleaseIndex(token="ghs_abc")
    assert index.headers["Authorization"] == "Bearer ghs_abc"
    assert "Authorization" not in ReleaseIndex().headers


@pytest.mark.asyncio
async def test_get_latest_release():
    with patch("setup_geth.versions.release_index.AsyncHTTPClient") as cls:
        client = mock_client(cls, {"tag_name": "v1.14.0", "prerelease": False, "assets": []})
        release = await ReleaseIndex("https://api.example/repos/ethereum/go-ethereum/").get_latest_release()

    assert release.tag_name == "v1.14.0"
    client.get.assert_awaited_once_with("https://api.example/repos/ethereum/go-ethereum/releases/latest")


@pytest.mark.asyncio
async def test_get_tag_commit():
    with patch("setup_geth.versions.release_index.AsyncHTTPClient") as cls:
        client = mock_client(cls, {"sha": "916d6a441a866cb618ae826c220866de118899f7"})
        commit = await ReleaseIndex().get_tag_commit("v1.13.5")

    assert commit.short_sha == "916d6a44"
    assert client.get.await_args.args[0].endswith("/commits/v1.13.5")


@pytest.mark.asyncio
async def test_http_error_becomes_fetch_error():
    error = aiohttp.ClientResponseError(request_info=MagicMock(), history=(), status=404)
    with patch("setup_geth.versions.release_index.AsyncHTTPClient") as cls:
        mock_client(cls, error=error)
        with pytest.raises(FetchError, match="HTTP 404"):
            await ReleaseIndex().get_tag_commit("v0.0.1")


@pytest.mark.asyncio
async def test_connection_error_becomes_fetch_error():
    with patch("setup_geth.versions.release_index.AsyncHTTPClient") as cls:
        mock_client(cls, error=aiohttp.ClientConnectionError("connection refused"))
        with pytest.raises(FetchError, match="connection refused"):
            await ReleaseIndex().get_latest_release()


@pytest.mark.parametrize("payload", [
    {"message": "API rate limit exceeded"},
    [{"tag_name": "v1.14.0"}],
    None,
])
@pytest.mark.asyncio
async def test_unexpected_payload_becomes_fetch_error(payload):
    with patch("setup_geth.versions.release_index.AsyncHTTPClient") as cls:
        mock_client(cls, payload)
        with pytest.raises(FetchError, match="unexpected response"):
            await ReleaseIndex().get_latest_release()


@pytest.mark.asyncio
async def test_commit_without_sha_becomes_fetch_error():
    with patch("setup_geth.versions.release_index.AsyncHTTPClient") as cls:
        mock_client(cls, {"message": "Not Found"})
        with pytest.raises(FetchError):
            await ReleaseIndex().get_tag_commit("v1.13.5")


@pytest.mark.asyncio
async def test_malformed_json_becomes_fetch_error():
    with patch("setup_geth.versions.release_index.AsyncHTTPClient") as cls:
        mock_client(cls, error=ValueError("Expecting value: line 1 column 1 (char 0)"))
        with pytest.raises(FetchError, match="malformed body"):
            await ReleaseIndex().get_latest_release()

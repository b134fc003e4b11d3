"""Release index lookups against the go-ethereum GitHub repository."""

import logging
import aiohttp
from pydantic import BaseModel, ValidationError
from typing import Optional, Type, TypeVar

from ..config import DEFAULT_RELEASE_API
from ..errors import FetchError
from ..utils.async_http import AsyncHTTPClient
from .models import GitHubCommit, GitHubRelease

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ReleaseIndex:
    """Translates release queries into GitHub API calls."""

    def __init__(self, api_base: str = DEFAULT_RELEASE_API, token: Optional[str] = None,
                 timeout: float = 60.0):
        self.api_base = api_base.rstrip("/")
        self.headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "setup-geth",
        }
        if token:
            self.headers["Authorization"] = f"Bearer {token}"
        self.timeout = timeout

    async def _get(self, path: str, model: Type[ModelT]) -> ModelT:
        url = f"{self.api_base}/{path}"
        logger.debug("GET %s", url)
        try:
            async with AsyncHTTPClient(self.headers, timeout=self.timeout) as client:
                data = await client.get(url)
        except aiohttp.ClientResponseError as e:
            raise FetchError(f"{url} returned HTTP {e.status}") from e
        except (aiohttp.ClientError, TimeoutError) as e:
            raise FetchError(f"request to {url} failed: {e}") from e
        except ValueError as e:
            raise FetchError(f"{url} returned a malformed body: {e}") from e

        try:
            return model.model_validate(data)
        except (ValidationError, TypeError) as e:
            raise FetchError(f"unexpected response from {url}: {e}") from e

    async def get_latest_release(self) -> GitHubRelease:
        """Most recent stable release (drafts and pre-releases excluded)."""
        release = await self._get("releases/latest", GitHubRelease)
        logger.info("Latest Geth release is %s", release.tag_name)
        return release

    async def get_tag_commit(self, tag: str) -> GitHubCommit:
        """Commit a release tag points at."""
        return await self._get(f"commits/{tag}", GitHubCommit)

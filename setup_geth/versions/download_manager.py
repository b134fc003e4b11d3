"""Download manager for Geth release archives."""

import logging
import aiohttp
import aiofiles
from pathlib import Path
from typing import Callable, Optional

from ..config import DEFAULT_DOWNLOAD_BASE
from ..errors import FetchError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class DownloadManager:
    def __init__(self, base_url: str = DEFAULT_DOWNLOAD_BASE, timeout: float = 60.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self.session:
            await self.session.close()

    def archive_url(self, archive_name: str) -> str:
        return f"{self.base_url}/{archive_name}"

    async def download_file(self, url: str, dest: Path,
                            progress_callback: Optional[Callable] = None) -> Path:
        """Stream a file to disk."""
        dest.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Downloading %s", url)

        try:
            async with self.session.get(url) as resp:
                if resp.status != 200:
                    raise FetchError(f"{url} returned HTTP {resp.status}")

                total_size = int(resp.headers.get('Content-Length', 0))
                downloaded = 0

                async with aiofiles.open(dest, 'wb') as f:
                    async for chunk in resp.content.iter_chunked(CHUNK_SIZE):
                        await f.write(chunk)
                        downloaded += len(chunk)
                        if progress_callback:
                            await progress_callback(dest.name, downloaded, total_size)
        except (aiohttp.ClientError, TimeoutError) as e:
            raise FetchError(f"download of {url} failed: {e}") from e
        except OSError as e:
            raise FetchError(f"could not write {dest}: {e}") from e

        logger.debug("Wrote %d bytes to %s", downloaded, dest)
        return dest

    async def download_archive(self, archive_name: str, dest_dir: Path,
                               progress_callback: Optional[Callable] = None) -> Path:
        """Download a release archive by name into ``dest_dir``."""
        return await self.download_file(self.archive_url(archive_name), dest_dir / archive_name,
                                        progress_callback)

"""Geth installer for CI runners."""

import asyncio
import logging
import shutil
import stat
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional

from ..config import ActionSettings
from ..errors import InstallError
from ..utils import workflow
from ..versions.download_manager import DownloadManager
from ..versions.models import InstallResult, Platform, VersionDescriptor
from ..versions.release_index import ReleaseIndex
from .archive import extract_archive, find_binary

logger = logging.getLogger(__name__)


class PlatformInstaller:
    BREW_TAP = "ethereum/ethereum"
    BREW_FORMULA = "ethereum"

    # Map to gethstore identifiers
    ARCHIVE_OS = {
        Platform.LINUX: "linux",
        Platform.WINDOWS: "windows",
    }
    ARCHIVE_EXT = {
        Platform.LINUX: "tar.gz",
        Platform.WINDOWS: "zip",
    }

    def __init__(self, platform: Platform, settings: ActionSettings, release_index: ReleaseIndex,
                 downloads: Optional[DownloadManager] = None):
        self.platform = platform
        self.settings = settings
        self.release_index = release_index
        self.downloads = downloads or DownloadManager(settings.download_base, timeout=settings.http_timeout)

    @property
    def binary_name(self) -> str:
        return "geth.exe" if self.platform is Platform.WINDOWS else "geth"

    def archive_name(self, version: str, commit: str) -> str:
        """Archive name on the download host, e.g. ``geth-linux-amd64-1.13.5-916d6a44.tar.gz``."""
        os_id = self.ARCHIVE_OS[self.platform]
        ext = self.ARCHIVE_EXT[self.platform]
        return f"geth-{os_id}-amd64-{version}-{commit}.{ext}"

    async def install(self, descriptor: VersionDescriptor) -> InstallResult:
        """Install the resolved version the way this platform requires."""
        if self.platform is Platform.MACOS:
            return await self.install_with_brew(descriptor)
        return await self.install_from_archive(descriptor)

    async def install_from_archive(self, descriptor: VersionDescriptor) -> InstallResult:
        """Download, extract and place the binary on PATH."""
        commit = await self.release_index.get_tag_commit(descriptor.tag)
        archive_name = self.archive_name(descriptor.version, commit.short_sha)
        descriptor = descriptor.model_copy(update={"download_id": archive_name})
        install_dir = self.settings.install_dir(descriptor.version)

        temp_root = self.settings.temp_dir
        temp_root.mkdir(parents=True, exist_ok=True)
        with tempfile.TemporaryDirectory(prefix="setup-geth-", dir=temp_root) as work:
            work_dir = Path(work)
            async with self.downloads as downloads:
                archive_path = await downloads.download_archive(archive_name, work_dir)

            loop = asyncio.get_event_loop()
            extract_dir = await loop.run_in_executor(None, extract_archive, archive_path, work_dir / "extract")
            binary = find_binary(extract_dir, self.binary_name)
            target = self.place_binary(binary, install_dir)

        workflow.add_path(install_dir, self.settings.github_path)
        logger.info("Installed Geth %s to %s", descriptor.version, target)
        return InstallResult(platform=self.platform, descriptor=descriptor,
                             binary_path=target, install_dir=install_dir)

    def place_binary(self, binary: Path, install_dir: Path) -> Path:
        """Copy the binary into the fixed install directory."""
        target = install_dir / self.binary_name
        try:
            install_dir.mkdir(parents=True, exist_ok=True)
            shutil.copy2(binary, target)
            if self.platform is not Platform.WINDOWS:
                target.chmod(target.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        except OSError as e:
            raise InstallError(f"could not copy {binary.name} to {install_dir}: {e}") from e
        return target

    async def install_with_brew(self, descriptor: VersionDescriptor) -> InstallResult:
        """Delegate to Homebrew; it installs whatever the tap currently ships."""
        brew = shutil.which("brew")
        if not brew:
            raise InstallError("Homebrew (brew) is not available on this runner")

        descriptor = descriptor.model_copy(update={"download_id": f"brew install {self.BREW_FORMULA}"})
        await self.run_command([brew, "tap", self.BREW_TAP])
        await self.run_command([brew, "install", self.BREW_FORMULA])

        geth = shutil.which("geth")
        if not geth:
            raise InstallError(f"brew installed {self.BREW_FORMULA} but geth is not on PATH")

        logger.info("Installed Geth with Homebrew at %s", geth)
        return InstallResult(platform=self.platform, descriptor=descriptor, binary_path=Path(geth))

    async def run_command(self, cmd: List[str]) -> str:
        """Run a package-manager command, failing on a non-zero exit."""
        def _run():
            return subprocess.run(cmd, capture_output=True, text=True)

        logger.info("Running %s", " ".join(cmd))
        try:
            result = await asyncio.get_event_loop().run_in_executor(None, _run)
        except OSError as e:
            raise InstallError(f"could not run {cmd[0]}: {e}") from e

        if result.returncode != 0:
            detail = (result.stderr or result.stdout).strip()
            raise InstallError(f"'{' '.join(cmd)}' exited with {result.returncode}: {detail}")
        return result.stdout

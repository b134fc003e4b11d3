"""Installed-version detection and step output."""

import asyncio
import logging
import re
import subprocess
from pathlib import Path
from typing import List, Tuple

from ..config import ActionSettings
from ..errors import VerificationError
from ..utils import workflow
from ..versions.models import SEMVER_PATTERN, InstallResult

logger = logging.getLogger(__name__)

VERSION_LINE = re.compile(r"^Version:\s*(\S+)", re.MULTILINE)
OUTPUT_NAME = "version"


def parse_version_output(output: str) -> str:
    """Pull the version out of ``geth version`` output.

    Release builds report e.g. ``Version: 1.13.5-stable``; the ``-stable``
    marker is not part of the published version.
    """
    match = VERSION_LINE.search(output)
    if not match:
        raise VerificationError("no 'Version:' line in geth version output")

    version = match.group(1)
    if version.startswith("v"):
        version = version[1:]
    if version.endswith("-stable"):
        version = version[:-len("-stable")]
    if not SEMVER_PATTERN.fullmatch(version):
        raise VerificationError(f"unrecognised version '{match.group(1)}' reported by geth")
    return version


class OutputReporter:
    def __init__(self, settings: ActionSettings):
        self.settings = settings

    async def query_version(self, binary: Path) -> str:
        """Ask the installed binary for its version."""
        def _run():
            return subprocess.run([str(binary), "version"], capture_output=True, text=True)

        try:
            result = await asyncio.get_event_loop().run_in_executor(None, _run)
        except OSError as e:
            raise VerificationError(f"could not run {binary}: {e}") from e

        if result.returncode != 0:
            raise VerificationError(f"'{binary} version' exited with {result.returncode}: {result.stderr.strip()}")
        return parse_version_output(result.stdout)

    async def verify(self, install: InstallResult) -> Tuple[str, List[str]]:
        """Return the installed version and any warnings about it."""
        installed = await self.query_version(install.binary_path)
        requested = install.descriptor.version
        warnings = []

        if installed != requested:
            if not install.via_package_manager:
                raise VerificationError(f"requested {requested} but the installed binary reports {installed}")
            message = (f"Requested Geth {requested} but Homebrew installed {installed}; "
                       f"Homebrew only provides the latest release")
            logger.warning(message)
            workflow.warning(message)
            warnings.append(message)

        logger.info("Geth %s verified at %s", installed, install.binary_path)
        return installed, warnings

    def publish(self, version: str):
        """Publish the installed version as the step output."""
        workflow.set_output(OUTPUT_NAME, version, self.settings.github_output)

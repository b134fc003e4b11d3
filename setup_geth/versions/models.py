"""Data models for Geth versions and releases."""

import re
from enum import Enum
from pathlib import Path
from pydantic import BaseModel
from typing import List, Optional

SEMVER_PATTERN = re.compile(r"\d+\.\d+\.\d+(-[\w.]+)?")


class Platform(str, Enum):
    LINUX = "linux"
    WINDOWS = "windows"
    MACOS = "macos"


class VersionDescriptor(BaseModel):
    """One version as it flows through a run."""
    raw: str
    version: str
    download_id: str = ""

    @property
    def tag(self) -> str:
        return f"v{self.version}"


class GitHubAsset(BaseModel):
    name: str
    browser_download_url: Optional[str] = None
    size: int = 0


class GitHubRelease(BaseModel):
    tag_name: str
    name: Optional[str] = None
    draft: bool = False
    prerelease: bool = False
    html_url: Optional[str] = None
    assets: List[GitHubAsset] = []


class GitHubCommit(BaseModel):
    sha: str

    @property
    def short_sha(self) -> str:
        return self.sha[:8]


class InstallResult(BaseModel):
    platform: Platform
    descriptor: VersionDescriptor
    binary_path: Path
    install_dir: Optional[Path] = None

    @property
    def via_package_manager(self) -> bool:
        return self.platform is Platform.MACOS

"""Action configuration.

Inputs arrive the way GitHub Actions passes them to a step (``INPUT_*``
variables), alongside the runner's own environment (``GITHUB_OUTPUT``,
``GITHUB_PATH``, ``RUNNER_*``). Everything is read once, through
pydantic-settings, and handed down to the components.
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RELEASE_API = "https://api.github.com/repos/ethereum/go-ethereum"
DEFAULT_DOWNLOAD_BASE = "https://gethstore.blob.core.windows.net/builds"


class ActionSettings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    version: str = Field(default="latest", validation_alias=AliasChoices("INPUT_VERSION"))
    token: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("INPUT_TOKEN", "GITHUB_TOKEN")
    )

    github_output: Optional[Path] = Field(default=None, validation_alias=AliasChoices("GITHUB_OUTPUT"))
    github_path: Optional[Path] = Field(default=None, validation_alias=AliasChoices("GITHUB_PATH"))

    runner_os: Optional[str] = Field(default=None, validation_alias=AliasChoices("RUNNER_OS"))
    runner_arch: Optional[str] = Field(default=None, validation_alias=AliasChoices("RUNNER_ARCH"))
    runner_tool_cache: Optional[Path] = Field(
        default=None, validation_alias=AliasChoices("RUNNER_TOOL_CACHE")
    )
    runner_temp: Optional[Path] = Field(default=None, validation_alias=AliasChoices("RUNNER_TEMP"))

    release_api: str = Field(
        default=DEFAULT_RELEASE_API, validation_alias=AliasChoices("SETUP_GETH_RELEASE_API")
    )
    download_base: str = Field(
        default=DEFAULT_DOWNLOAD_BASE, validation_alias=AliasChoices("SETUP_GETH_DOWNLOAD_BASE")
    )
    http_timeout: float = Field(default=60.0, validation_alias=AliasChoices("SETUP_GETH_HTTP_TIMEOUT"))

    @property
    def tool_cache(self) -> Path:
        return self.runner_tool_cache or (Path.home() / ".setup-geth" / "tool-cache")

    @property
    def temp_dir(self) -> Path:
        return self.runner_temp or Path(tempfile.gettempdir())

    def install_dir(self, version: str) -> Path:
        """Fixed install location for a resolved version."""
        return self.tool_cache / "geth" / version / "x64"

"""Resolve → install → verify pipeline."""

import logging
from enum import Enum
from pydantic import BaseModel, ConfigDict
from typing import List, Optional

from ..config import ActionSettings
from ..errors import SetupError
from ..reporting.output import OutputReporter
from ..runtime.installer import PlatformInstaller
from ..runtime.platform import detect_platform
from ..versions.models import Platform, VersionDescriptor
from ..versions.release_index import ReleaseIndex
from ..versions.resolver import VersionResolver

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    START = "start"
    RESOLVING = "resolving"
    INSTALLING = "installing"
    VERIFYING = "verifying"
    DONE = "done"
    FAILED = "failed"


class PipelineResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    requested: str
    stage: Stage = Stage.START
    failed_stage: Optional[Stage] = None
    descriptor: Optional[VersionDescriptor] = None
    installed_version: Optional[str] = None
    warnings: List[str] = []
    error: Optional[SetupError] = None

    @property
    def ok(self) -> bool:
        return self.stage is Stage.DONE


class SetupPipeline:
    """Runs each stage once, in order, stopping at the first failure."""

    def __init__(self, resolver: VersionResolver, installer: PlatformInstaller, reporter: OutputReporter):
        self.resolver = resolver
        self.installer = installer
        self.reporter = reporter

    @classmethod
    def from_settings(cls, settings: ActionSettings, platform: Optional[Platform] = None) -> "SetupPipeline":
        """Wire the default collaborators; the platform is detected here, once."""
        platform = platform or detect_platform(settings.runner_os, settings.runner_arch)
        logger.debug("Detected platform %s", platform.value)

        release_index = ReleaseIndex(settings.release_api, token=settings.token, timeout=settings.http_timeout)
        return cls(
            VersionResolver(release_index),
            PlatformInstaller(platform, settings, release_index),
            OutputReporter(settings),
        )

    async def run(self, token: str) -> PipelineResult:
        result = PipelineResult(requested=token)
        try:
            result.stage = Stage.RESOLVING
            result.descriptor = await self.resolver.resolve(token)

            result.stage = Stage.INSTALLING
            install = await self.installer.install(result.descriptor)
            result.descriptor = install.descriptor

            result.stage = Stage.VERIFYING
            version, warnings = await self.reporter.verify(install)
            self.reporter.publish(version)
            result.installed_version = version
            result.warnings = warnings

            result.stage = Stage.DONE
        except SetupError as e:
            e.stage = e.stage or result.stage.value
            result.failed_stage = result.stage
            result.stage = Stage.FAILED
            result.error = e
            logger.error(e.describe())

        return result

"""Version token resolution."""

import logging

from ..errors import InvalidVersion
from .models import SEMVER_PATTERN, VersionDescriptor
from .release_index import ReleaseIndex

logger = logging.getLogger(__name__)

LATEST = "latest"


def normalize_version(token: str) -> str:
    """Strip an optional leading ``v`` and validate the semver shape."""
    version = token[1:] if token.startswith("v") else token
    if not SEMVER_PATTERN.fullmatch(version):
        raise InvalidVersion(f"'{token}' is not 'latest' or a <major>.<minor>.<patch> version")
    return version


class VersionResolver:
    def __init__(self, release_index: ReleaseIndex):
        self.release_index = release_index

    async def resolve(self, token: str) -> VersionDescriptor:
        """Turn a user-supplied token into a normalized version."""
        if token == LATEST:
            release = await self.release_index.get_latest_release()
            try:
                version = normalize_version(release.tag_name)
            except InvalidVersion as e:
                raise InvalidVersion(f"release index returned unrecognised tag '{release.tag_name}'") from e
        else:
            version = normalize_version(token)

        logger.info("Resolved '%s' to %s", token, version)
        return VersionDescriptor(raw=token, version=version)

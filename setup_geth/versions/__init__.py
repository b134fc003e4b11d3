"""Version resolution and release artifacts."""

from .resolver import VersionResolver, normalize_version
from .release_index import ReleaseIndex
from .download_manager import DownloadManager
from .models import Platform, VersionDescriptor, GitHubRelease, InstallResult

__all__ = [
    "VersionResolver", "normalize_version", "ReleaseIndex", "DownloadManager",
    "Platform", "VersionDescriptor", "GitHubRelease", "InstallResult",
]

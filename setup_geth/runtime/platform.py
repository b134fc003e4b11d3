"""Host platform detection."""

import platform
from typing import Optional

from ..errors import InstallError
from ..versions.models import Platform

# Map to the installer's platform tags
OS_MAP = {
    "linux": Platform.LINUX,
    "windows": Platform.WINDOWS,
    "macos": Platform.MACOS,
    "darwin": Platform.MACOS,
}

X64_MACHINES = {"x64", "x86_64", "amd64"}


def detect_platform(runner_os: Optional[str] = None, runner_arch: Optional[str] = None) -> Platform:
    """Resolve the platform tag once, from the runner environment or the host.

    Archive installs only exist for x64; Homebrew picks its own bottle.
    """
    system = (runner_os or platform.system()).lower()
    if system not in OS_MAP:
        raise InstallError(f"unsupported operating system '{system}'")

    detected = OS_MAP[system]
    if detected is not Platform.MACOS:
        machine = (runner_arch or platform.machine()).lower()
        if machine not in X64_MACHINES:
            raise InstallError(f"unsupported architecture '{machine}', only x64 builds are published")
    return detected

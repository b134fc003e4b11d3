"""Platform detection and installation."""

from .installer import PlatformInstaller
from .platform import detect_platform

__all__ = ["PlatformInstaller", "detect_platform"]

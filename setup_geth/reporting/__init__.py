"""Installed-version reporting."""

from .output import OutputReporter, parse_version_output

__all__ = ["OutputReporter", "parse_version_output"]

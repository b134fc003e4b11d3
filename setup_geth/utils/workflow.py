"""GitHub Actions workflow commands and environment files."""

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_output(name: str, value: str, output_file: Optional[Path] = None):
    """Publish a step output for later workflow steps."""
    if output_file:
        with open(output_file, "a", encoding="utf-8") as f:
            f.write(f"{name}={value}\n")
    else:
        print(f"{name}={value}")
    logger.debug("Set output %s=%s", name, value)


def add_path(directory: Path, path_file: Optional[Path] = None):
    """Prepend a directory to PATH for this process and for later steps."""
    os.environ["PATH"] = f"{directory}{os.pathsep}{os.environ.get('PATH', '')}"
    if path_file:
        with open(path_file, "a", encoding="utf-8") as f:
            f.write(f"{directory}\n")
    logger.debug("Added %s to PATH", directory)


def warning(message: str):
    print(f"::warning::{_escape_data(message)}", flush=True)


def error(message: str):
    print(f"::error::{_escape_data(message)}", flush=True)

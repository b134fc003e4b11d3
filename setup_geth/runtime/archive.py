"""Archive extraction for Geth release bundles."""

import logging
import tarfile
import zipfile
import zlib
from pathlib import Path

from ..errors import ExtractError

logger = logging.getLogger(__name__)


def extract_archive(archive_path: Path, extract_dir: Path) -> Path:
    """Extract a ``.tar.gz`` or ``.zip`` archive into ``extract_dir``."""
    name = archive_path.name.lower()

    try:
        extract_dir.mkdir(parents=True, exist_ok=True)
        if name.endswith((".tar.gz", ".tgz")):
            with tarfile.open(archive_path, "r:gz") as tar_ref:
                tar_ref.extractall(extract_dir, filter="data")
        elif name.endswith(".zip"):
            with zipfile.ZipFile(archive_path, 'r') as zip_ref:
                zip_ref.extractall(extract_dir)
        else:
            raise ExtractError(f"unsupported archive format: {archive_path.name}")
    except (tarfile.TarError, zipfile.BadZipFile, zlib.error, EOFError) as e:
        raise ExtractError(f"could not extract {archive_path.name}: {e}") from e
    except OSError as e:
        raise ExtractError(f"could not write {archive_path.name} contents to {extract_dir}: {e}") from e

    logger.debug("Extracted %s into %s", archive_path.name, extract_dir)
    return extract_dir


def find_binary(root: Path, binary_name: str) -> Path:
    """Locate the executable inside an extracted bundle."""
    for candidate in sorted(root.rglob(binary_name)):
        if candidate.is_file():
            return candidate
    raise ExtractError(f"{binary_name} not found in extracted archive")

"""Shared fixtures."""

import io
import os
import tarfile
import zipfile
from pathlib import Path

import pytest

from setup_geth.config import ActionSettings
from setup_geth.errors import FetchError

GETH_SCRIPT = b"#!/bin/sh\necho 'Version: 1.13.5-stable'\n"


def make_tarball(path: Path, member: str, data: bytes = GETH_SCRIPT) -> Path:
    with tarfile.open(path, "w:gz") as tar:
        info = tarfile.TarInfo(member)
        info.size = len(data)
        info.mode = 0o755
        tar.addfile(info, io.BytesIO(data))
    return path


def make_zip(path: Path, member: str, data: bytes = b"MZ") -> Path:
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr(member, data)
    return path


class FakeDownloads:
    """Stands in for DownloadManager, producing a real archive on disk."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.requested = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def download_archive(self, archive_name, dest_dir, progress_callback=None):
        self.requested.append(archive_name)
        if self.fail:
            raise FetchError(f"https://example.invalid/{archive_name} returned HTTP 404")

        path = dest_dir / archive_name
        if archive_name.endswith(".zip"):
            return make_zip(path, f"{archive_name[:-len('.zip')]}/geth.exe")
        return make_tarball(path, f"{archive_name[:-len('.tar.gz')]}/geth")


@pytest.fixture
def settings(tmp_path, monkeypatch):
    # PATH is prepended to during installs
    monkeypatch.setenv("PATH", os.environ.get("PATH", ""))
    return ActionSettings(
        version="latest",
        token=None,
        github_output=tmp_path / "github_output",
        github_path=tmp_path / "github_path",
        runner_os="Linux",
        runner_arch="X64",
        runner_tool_cache=tmp_path / "tool-cache",
        runner_temp=tmp_path / "temp",
    )

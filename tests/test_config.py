"""Tests for action configuration."""

from pathlib import Path

from setup_geth.config import ActionSettings


def test_inputs_from_environment(monkeypatch):
    monkeypatch.setenv("INPUT_VERSION", "v1.13.5")
    monkeypatch.setenv("INPUT_TOKEN", "ghs_abc")
    monkeypatch.setenv("RUNNER_TOOL_CACHE", "/opt/hostedtoolcache")
    settings = ActionSettings()
    assert settings.version == "v1.13.5"
    assert settings.token == "ghs_abc"
    assert settings.install_dir("1.13.5") == Path("/opt/hostedtoolcache/geth/1.13.5/x64")


def test_unprefixed_variables_are_ignored(monkeypatch):
    monkeypatch.delenv("INPUT_VERSION", raising=False)
    monkeypatch.delenv("INPUT_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.setenv("VERSION", "9.9.9")
    monkeypatch.setenv("TOKEN", "stray")
    settings = ActionSettings()
    assert settings.version == "latest"
    assert settings.token is None


def test_construct_by_field_name(tmp_path):
    settings = ActionSettings(version="1.13.5", runner_tool_cache=tmp_path)
    assert settings.version == "1.13.5"
    assert settings.tool_cache == tmp_path

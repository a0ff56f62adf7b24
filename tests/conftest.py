"""
Pytest configuration and shared test utilities.

This module provides shared fixtures for all ajaxwire tests.
"""

import logging
from pathlib import Path

import pytest

from ajaxwire.container.container import DefaultContainer
from ajaxwire.hosting import HostConfig, HostContext
from ajaxwire.utils.config import CONFIG_ENV_VAR, reset_config
from ajaxwire.utils.logger import get_logger


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test in an empty working directory with no settings file.

    Keeps a stray ajaxwire.yml or ajaxwire-settings.yml in the developer's
    checkout from leaking into results.
    """
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_config()
    yield workdir
    reset_config()


@pytest.fixture
def container():
    """An empty container."""
    return DefaultContainer()


@pytest.fixture
def test_logger(request):
    """A component logger private to the current test.

    The level is reset afterwards so logLevel handling cannot leak between tests.
    """
    logger = get_logger(name=f"TEST.{request.node.name}", color="white")
    yield logger
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def resource_root(tmp_path):
    """Directory declarative resources are written to and resolved against."""
    root = tmp_path / "resources"
    root.mkdir()
    return root


@pytest.fixture
def write_resource(resource_root):
    """Factory writing a YAML resource under resource_root.

    Usage::

        write_resource("app.yml", "settings:\\n  debug: true\\n")
    """

    def _write(name: str, content: str) -> Path:
        path = resource_root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def make_host_config(resource_root):
    """Factory for HostConfig objects rooted at resource_root."""

    def _make(params: dict[str, str] | None = None, name: str = "remoting") -> HostConfig:
        return HostConfig(name, params or {}, HostContext("test-host", resource_root))

    return _make

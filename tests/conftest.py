"""Test configuration and fixtures."""

import os
import subprocess
from pathlib import Path
from typing import Callable

import httpx
import pytest

from zeno.config import ProjectConfig


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "e2e: end-to-end tests requiring network")


@pytest.fixture(autouse=True)
def skip_e2e_unless_requested(request):
    """E2E tests only run when ZENO_E2E is set."""
    if request.node.get_closest_marker("e2e"):
        if os.environ.get("ZENO_E2E", "").lower() not in ("1", "true", "yes"):
            pytest.skip("E2E tests need network (set ZENO_E2E=1)")


@pytest.fixture(autouse=True)
def package_managers_on_path(monkeypatch):
    """Resolve every package manager to its bare name, installed or not."""
    monkeypatch.setattr("zeno.package_manager.shutil.which", lambda name: name)


@pytest.fixture
def project(tmp_path: Path, monkeypatch) -> Path:
    """Set up a temporary JavaScript project and make it the working directory."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "package.json").write_text('{"name": "demo", "dependencies": {}}')
    return tmp_path


@pytest.fixture
def config(project: Path) -> ProjectConfig:
    """Default configuration for the temporary project."""
    return ProjectConfig(root=project)


class RecordingRunner:
    """Stand-in for subprocess.run that records commands instead of running them."""

    def __init__(self, returncode: int = 0, raises: OSError | None = None):
        self.returncode = returncode
        self.raises = raises
        self.calls: list[tuple[list[str], dict]] = []

    def __call__(self, command, **kwargs):
        self.calls.append((list(command), kwargs))
        if self.raises is not None:
            raise self.raises
        if kwargs.get("check") and self.returncode != 0:
            raise subprocess.CalledProcessError(self.returncode, command)
        return subprocess.CompletedProcess(command, self.returncode)

    @property
    def commands(self) -> list[list[str]]:
        return [command for command, _ in self.calls]


@pytest.fixture
def runner_factory() -> Callable[..., RecordingRunner]:
    """Create recording subprocess runners."""
    return RecordingRunner


@pytest.fixture
def recording_runner() -> RecordingRunner:
    """A recording subprocess runner that always succeeds."""
    return RecordingRunner()


class ComponentServer:
    """Fake raw file host serving component sources by URL path suffix."""

    def __init__(self, files: dict[str, str] | None = None, status_code: int = 200):
        self.files = files or {}
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        filename = request.url.path.rsplit("/", 1)[-1]
        if self.status_code != 200:
            return httpx.Response(self.status_code, text="error")
        if filename not in self.files:
            return httpx.Response(404, text="404: Not Found")
        return httpx.Response(200, text=self.files[filename])

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def server_factory() -> Callable[..., ComponentServer]:
    """Create fake component servers."""
    return ComponentServer

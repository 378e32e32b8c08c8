"""Shared fixtures: scripted process layer and a Screensaver over a temp home."""

from __future__ import annotations

from typing import Callable, Sequence

import pytest

from screensaver_any.dispatch import Screensaver
from screensaver_any.platform.file_adapter import LocalFileAdapter
from screensaver_any.platform.system_adapter import CommandResult, ISystemAdapter


class MockSystemAdapter(ISystemAdapter):
    """Fake process table, fake PATH and scripted command results.

    Commands without a scripted response succeed with empty output. Every
    call is recorded in ``calls`` as ``(kind, argument)``.
    """

    def __init__(self, processes: Sequence[str] = (), on_path: Sequence[str] = ()) -> None:
        self.processes = set(processes)
        self.on_path = set(on_path)
        self.responses: dict[tuple[str, ...], CommandResult] = {}
        self.handlers: dict[str, Callable[[list[str]], CommandResult]] = {}
        self.calls: list[tuple] = []

    def respond(self, argv: Sequence[str], stdout: str = "", returncode: int = 0,
                stderr: str = "") -> None:
        self.responses[tuple(argv)] = CommandResult(stdout, stderr, returncode)

    def handle(self, program: str, handler: Callable[[list[str]], CommandResult]) -> None:
        self.handlers[program] = handler

    def run(self, argv, capture_stdout=True, capture_stderr=True) -> CommandResult:
        self.calls.append(("run", tuple(argv)))
        if tuple(argv) in self.responses:
            return self.responses[tuple(argv)]
        if argv[0] in self.handlers:
            return self.handlers[argv[0]](list(argv))
        return CommandResult("", "", 0)

    def resolve_on_path(self, name: str) -> bool:
        self.calls.append(("which", name))
        return name in self.on_path

    def process_exists(self, name: str) -> bool:
        self.calls.append(("process", name))
        return name in self.processes

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [c[1] for c in self.calls if c[0] == "run"]

    @property
    def probes(self) -> list[tuple]:
        return [c for c in self.calls if c[0] in ("which", "process")]


class RecordingFileAdapter(LocalFileAdapter):
    """Real file access that also records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def read_text(self, path: str) -> str:
        self.calls.append(("read", path))
        return super().read_text(path)

    def write_text(self, path: str, content: str) -> None:
        self.calls.append(("write", path))
        super().write_text(path, content)

    def exists(self, path: str) -> bool:
        self.calls.append(("exists", path))
        return super().exists(path)

    @property
    def writes(self) -> list[str]:
        return [p for kind, p in self.calls if kind == "write"]


def gsettings_store(values: dict[tuple[str, str], str]) -> Callable[[list[str]], CommandResult]:
    """A gsettings stand-in backed by *values* ({(schema, key): printed value})."""

    def handler(argv: list[str]) -> CommandResult:
        _, verb, schema, key, *rest = argv
        if verb == "set":
            old = values.get((schema, key), "")
            new = rest[0]
            # gsettings prints integers with their GVariant type
            values[(schema, key)] = f"uint32 {new}" if old.startswith("uint32") else new
            return CommandResult("", "", 0)
        if (schema, key) not in values:
            return CommandResult("", f"No such key “{key}”\n", 1)
        return CommandResult(values[(schema, key)] + "\n", "", 0)

    return handler


@pytest.fixture
def mock_system() -> MockSystemAdapter:
    return MockSystemAdapter()


@pytest.fixture
def files() -> RecordingFileAdapter:
    return RecordingFileAdapter()


@pytest.fixture
def home(tmp_path):
    return tmp_path


@pytest.fixture
def screensaver(mock_system, files, home) -> Screensaver:
    return Screensaver(system=mock_system, files=files, home=str(home))

"""Tests for the Cinnamon backend."""

from __future__ import annotations

import pytest

from screensaver_any.backends.cinnamon import CinnamonAdapter
from screensaver_any.result import ExecutionFailure, UnsupportedOperation


@pytest.fixture
def adapter(mock_system, files, home):
    return CinnamonAdapter(mock_system, files, str(home))


def test_activate(adapter, mock_system):
    assert adapter.activate() is True
    assert mock_system.commands == [("cinnamon-screensaver-command", "-l")]


def test_deactivate(adapter, mock_system):
    assert adapter.deactivate() is True
    assert mock_system.commands == [("cinnamon-screensaver-command", "-d")]


@pytest.mark.parametrize("reply, expected", [
    ("The screensaver is active\n", True),
    ("The screensaver is inactive\n", False),
])
def test_is_active(adapter, mock_system, reply, expected):
    mock_system.respond(["cinnamon-screensaver-command", "-q"], stdout=reply)
    assert adapter.is_active() is expected


def test_command_missing(adapter, mock_system):
    mock_system.respond(["cinnamon-screensaver-command", "-l"], returncode=-1,
                        stderr="[Errno 2] No such file or directory")
    with pytest.raises(ExecutionFailure, match="No such file"):
        adapter.activate()


@pytest.mark.parametrize("method, args", [
    ("get_timeout", ()),
    ("set_timeout", (300,)),
    ("enable", ()),
    ("disable", ()),
    ("is_enabled", ()),
    ("prevent_activation", ()),
])
def test_unsupported(adapter, mock_system, files, method, args):
    with pytest.raises(UnsupportedOperation):
        getattr(adapter, method)(*args)
    assert mock_system.calls == []
    assert files.calls == []

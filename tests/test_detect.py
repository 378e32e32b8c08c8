"""Tests for screensaver detection order and probe behaviour."""

from __future__ import annotations

import pytest

from screensaver_any.detect import ProcessTable, detect_backend
from screensaver_any.types import Backend
from tests.conftest import MockSystemAdapter


def kde_session(**kwargs) -> MockSystemAdapter:
    system = MockSystemAdapter(on_path=["qdbus"], **kwargs)
    system.respond(["qdbus", "org.kde.screensaver"], stdout="/ScreenSaver\n")
    return system


class TestSingleSignature:

    @pytest.mark.parametrize("process, expected", [
        ("xscreensaver", Backend.XSCREENSAVER),
        ("gnome-screensaver", Backend.GNOME),
        ("cinnamon-screensaver", Backend.CINNAMON),
    ])
    def test_process_signature(self, process, expected):
        assert detect_backend(MockSystemAdapter(processes=[process])) is expected

    def test_kde_dbus_service(self):
        assert detect_backend(kde_session()) is Backend.KDE

    def test_nothing_running_returns_none(self):
        system = MockSystemAdapter()
        assert detect_backend(system) is None
        assert [c for c in system.calls if c[0] == "process"] == [
            ("process", "xscreensaver"),
            ("process", "gnome-screensaver"),
            ("process", "cinnamon-screensaver"),
        ]


class TestProbeOrder:

    def test_xscreensaver_wins_over_everything(self):
        system = kde_session(processes=["xscreensaver", "gnome-screensaver", "cinnamon-screensaver"])
        assert detect_backend(system) is Backend.XSCREENSAVER
        # short-circuit: nothing after the first hit is probed
        assert system.calls == [("process", "xscreensaver")]

    def test_kde_wins_over_gnome_and_cinnamon(self):
        system = kde_session(processes=["gnome-screensaver", "cinnamon-screensaver"])
        assert detect_backend(system) is Backend.KDE
        assert ("process", "gnome-screensaver") not in system.calls

    def test_gnome_wins_over_cinnamon(self):
        system = MockSystemAdapter(processes=["gnome-screensaver", "cinnamon-screensaver"])
        assert detect_backend(system) is Backend.GNOME


class TestKdeProbe:

    def test_qdbus_missing_skips_dbus_call(self):
        system = MockSystemAdapter(processes=["cinnamon-screensaver"])
        assert detect_backend(system) is Backend.CINNAMON
        assert ("which", "qdbus") in system.calls
        assert system.commands == []

    def test_dbus_service_missing_falls_through(self):
        system = MockSystemAdapter(on_path=["qdbus"], processes=["gnome-screensaver"])
        system.respond(["qdbus", "org.kde.screensaver"], returncode=1,
                       stderr="Service 'org.kde.screensaver' does not exist.\n")
        assert detect_backend(system) is Backend.GNOME
        assert system.commands == [("qdbus", "org.kde.screensaver")]


class TestNoCrossCallCache:

    def test_each_detection_looks_again(self):
        system = MockSystemAdapter(processes=["gnome-screensaver"])
        assert detect_backend(system) is Backend.GNOME
        system.processes = {"xscreensaver"}
        assert detect_backend(system) is Backend.XSCREENSAVER

    def test_process_table_memoizes_within_one_instance(self):
        system = MockSystemAdapter(processes=["xscreensaver"])
        procs = ProcessTable(system)
        assert procs.exists("xscreensaver") is True
        assert procs.exists("xscreensaver") is True
        assert procs.exists("gnome-screensaver") is False
        assert system.calls == [("process", "xscreensaver"), ("process", "gnome-screensaver")]

"""Detect which screensaver program is running in the current session.

Probes run in a fixed order and the first hit wins:

1. ``xscreensaver`` process — long-running and unambiguous
2. KDE — ``qdbus`` on PATH and the ``org.kde.screensaver`` service answers
3. ``gnome-screensaver`` process (GNOME <= 3.6)
4. ``cinnamon-screensaver`` process

Process lookups are memoized for one ``detect_backend()`` call only; every
call looks at the live session again.
"""

from __future__ import annotations

import logging
from typing import Callable

from screensaver_any.backends.kde import DBUS_SERVICE, QDBUS
from screensaver_any.platform.system_adapter import ISystemAdapter
from screensaver_any.types import Backend

logger = logging.getLogger(__name__)


class ProcessTable:
    """Process-existence answers cached for the lifetime of one detection."""

    def __init__(self, system: ISystemAdapter) -> None:
        self._system = system
        self._seen: dict[str, bool] = {}

    def exists(self, name: str) -> bool:
        if name not in self._seen:
            self._seen[name] = self._system.process_exists(name)
        return self._seen[name]


Probe = Callable[[ISystemAdapter, ProcessTable], bool]


def _process_probe(name: str) -> Probe:
    def probe(system: ISystemAdapter, procs: ProcessTable) -> bool:
        logger.trace("Checking whether %s process exists ...", name)  # type: ignore[attr-defined]
        if procs.exists(name):
            logger.trace("%s process exists", name)  # type: ignore[attr-defined]
            return True
        logger.trace("%s process doesn't exist", name)  # type: ignore[attr-defined]
        return False
    return probe


def _kde_probe(system: ISystemAdapter, procs: ProcessTable) -> bool:
    logger.trace("Checking %s program ...", QDBUS)  # type: ignore[attr-defined]
    if not system.resolve_on_path(QDBUS):
        logger.trace("%s doesn't exist", QDBUS)  # type: ignore[attr-defined]
        return False
    logger.trace("%s exists", QDBUS)  # type: ignore[attr-defined]
    result = system.run([QDBUS, DBUS_SERVICE], capture_stdout=True, capture_stderr=True)
    if result.returncode != 0:
        logger.trace("Couldn't check %s dbus service", DBUS_SERVICE)  # type: ignore[attr-defined]
        return False
    logger.trace("%s dbus service exists", DBUS_SERVICE)  # type: ignore[attr-defined]
    return True


PROBES: tuple[tuple[Backend, Probe], ...] = (
    (Backend.XSCREENSAVER, _process_probe("xscreensaver")),
    (Backend.KDE, _kde_probe),
    (Backend.GNOME, _process_probe("gnome-screensaver")),
    (Backend.CINNAMON, _process_probe("cinnamon-screensaver")),
)


def detect_backend(system: ISystemAdapter) -> Backend | None:
    """Return the running screensaver, or None when no probe matches."""
    procs = ProcessTable(system)
    for backend, probe in PROBES:
        if probe(system, procs):
            logger.trace("Concluding screensaver is %s", backend.value)  # type: ignore[attr-defined]
            return backend
    logger.debug("No known screensaver detected")
    return None

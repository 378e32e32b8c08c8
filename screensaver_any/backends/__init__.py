"""Backend adapters: one per supported screensaver program."""

from __future__ import annotations

from screensaver_any.backends.base import ScreensaverAdapter
from screensaver_any.backends.cinnamon import CinnamonAdapter
from screensaver_any.backends.gnome import GnomeAdapter
from screensaver_any.backends.kde import KDEAdapter
from screensaver_any.backends.xscreensaver import XScreensaverAdapter
from screensaver_any.platform.file_adapter import IFileAdapter
from screensaver_any.platform.system_adapter import ISystemAdapter
from screensaver_any.result import UnknownBackend
from screensaver_any.types import Backend

ADAPTERS: dict[Backend, type[ScreensaverAdapter]] = {
    Backend.KDE: KDEAdapter,
    Backend.GNOME: GnomeAdapter,
    Backend.CINNAMON: CinnamonAdapter,
    Backend.XSCREENSAVER: XScreensaverAdapter,
}


def parse_backend(value: Backend | str) -> Backend:
    """Accept a Backend or its name (case-insensitive); UnknownBackend otherwise."""
    if isinstance(value, Backend):
        return value
    try:
        return Backend(str(value).strip().lower())
    except ValueError:
        raise UnknownBackend(value) from None


def get_adapter(backend: Backend, system: ISystemAdapter, files: IFileAdapter,
                home: str | None = None) -> ScreensaverAdapter:
    """Return the adapter for *backend*."""
    return ADAPTERS[backend](system, files, home)


__all__ = [
    "ADAPTERS",
    "Backend",
    "CinnamonAdapter",
    "GnomeAdapter",
    "KDEAdapter",
    "ScreensaverAdapter",
    "XScreensaverAdapter",
    "get_adapter",
    "parse_backend",
]

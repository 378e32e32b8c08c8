"""Line-preserving models of the small text config files we edit.

Both documents keep every line untouched except the ones a setter
rewrites, so comments, ordering and unknown keys survive a round-trip.

* ``IniDocument`` — KConfig style ``[Section]`` / ``Key=Value`` files
  (``kscreensaverrc``, ``kscreenlockerrc``).
* ``XResourcesDocument`` — ``name: value`` files such as ``~/.xscreensaver``,
  where a trailing backslash continues a value onto the next line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_INI_SECTION = re.compile(r"^\s*\[([^\]]*)\]\s*$")
_INI_ENTRY = re.compile(r"^(\s*([^\s=#;\[][^=]*?)\s*=\s*)(.*?)\s*$")
_XRES_ENTRY = re.compile(r"^(([A-Za-z0-9_.*-]+):\s*)(.*?)\s*$")


@dataclass
class Entry:
    index: int          # line number in the document
    key: str
    value: str
    prefix: str         # everything before the value, e.g. 'Timeout = '
    section: str | None = None


class LineDocument:
    """Common storage: the list of raw lines plus the parsed entries."""

    def __init__(self, text: str) -> None:
        self._lines: list[str] = text.splitlines(keepends=True)
        self.entries: list[Entry] = []
        self._parse()

    def _parse(self) -> None:
        raise NotImplementedError

    @property
    def text(self) -> str:
        return "".join(self._lines)

    def __str__(self) -> str:
        return self.text

    def find(self, key: str, section: str | None = None) -> Entry | None:
        """Return the first entry named *key* (within *section* if given)."""
        for entry in self.entries:
            if entry.key == key and (section is None or entry.section == section):
                return entry
        return None

    def get(self, key: str, section: str | None = None) -> str | None:
        entry = self.find(key, section)
        return entry.value if entry else None

    def replace(self, key: str, value: str, section: str | None = None) -> None:
        """Rewrite the value of an existing entry; KeyError if there is none."""
        entry = self.find(key, section)
        if entry is None:
            raise KeyError(key)
        line = self._lines[entry.index]
        eol = line[len(line.rstrip("\r\n")):]
        self._lines[entry.index] = f"{entry.prefix}{value}{eol}"
        entry.value = value


class IniDocument(LineDocument):

    def _parse(self) -> None:
        self.entries = []
        self.sections: dict[str, int] = {}
        section = None
        for i, raw in enumerate(self._lines):
            line = raw.rstrip("\r\n")
            m = _INI_SECTION.match(line)
            if m:
                section = m.group(1)
                self.sections.setdefault(section, i)
                continue
            m = _INI_ENTRY.match(line)
            if m:
                self.entries.append(Entry(i, m.group(2), m.group(3), m.group(1), section))

    def set(self, key: str, value: str, section: str) -> None:
        """Replace *key* in *section*, or add it (creating the section if needed)."""
        if self.find(key, section) is not None:
            self.replace(key, value, section)
            return

        new_line = f"{key}={value}\n"
        if section in self.sections:
            end = self._section_end(section)
            if not self._lines[end - 1].endswith("\n"):
                self._lines[end - 1] += "\n"
            self._lines.insert(end, new_line)
        else:
            if self._lines and not self._lines[-1].endswith("\n"):
                self._lines[-1] += "\n"
            if self._lines and self._lines[-1].strip():
                self._lines.append("\n")
            self._lines.extend([f"[{section}]\n", new_line])
        self._parse()

    def _section_end(self, section: str) -> int:
        """Index just past the last non-blank line of *section*."""
        start = self.sections[section]
        end = start + 1
        for i in range(start + 1, len(self._lines)):
            stripped = self._lines[i].strip()
            if _INI_SECTION.match(stripped):
                break
            if stripped:
                end = i + 1
        return end


class XResourcesDocument(LineDocument):

    def _parse(self) -> None:
        self.entries = []
        continued = False
        for i, raw in enumerate(self._lines):
            line = raw.rstrip("\r\n")
            if not continued:
                m = _XRES_ENTRY.match(line)
                if m:
                    self.entries.append(Entry(i, m.group(2), m.group(3), m.group(1)))
            continued = line.endswith("\\")

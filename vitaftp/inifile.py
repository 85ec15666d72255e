"""Reading and writing Windows-style INI files while keeping their layout.

The file is held as a list of lines. Each line is classified as a section
header, a ``key=value`` pair or a comment. Comments, blank lines and the
original spelling of keys are kept, so a file that is loaded and saved
again comes out unchanged apart from the values that were written.
"""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass, field, replace
from typing import NamedTuple

__all__ = ["EntryType", "Entry", "IniFile", "parse", "load"]

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class EntryType(enum.Enum):
    """What kind of line an entry is."""

    SECTION = 1
    KEY_VALUE = 2
    COMMENT = 3


@dataclass(frozen=True)
class Entry:
    """One line of an INI file."""

    type: EntryType
    text: str

    @classmethod
    def from_line(cls, text: str) -> Entry:
        """Classify a raw line; anything after ``;`` is ignored for this."""
        code = text.split(";", 1)[0]
        if "[" in code and "]" in code:
            kind = EntryType.SECTION
        elif "=" in code:
            kind = EntryType.KEY_VALUE
        else:
            kind = EntryType.COMMENT
        return cls(kind, text)


class _KeyMatch(NamedTuple):
    index: int
    key_text: str
    value: str
    comment: str


def _ascii_upper(text: str) -> str:
    return text.translate(_UPPER)


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _format_float(value: float) -> str:
    return f"{value:.10E}"


@dataclass
class IniFile:
    """An INI document held line by line."""

    entries: list[Entry] = field(default_factory=list)

    # -- lookup -----------------------------------------------------------

    def _find_section(self, section: str) -> int | None:
        wanted = _ascii_upper(f"[{section}]")
        for index, entry in enumerate(self.entries):
            if entry.type is EntryType.SECTION and _ascii_upper(entry.text) == wanted:
                return index
        return None

    def _find_key(self, section: str, key: str) -> tuple[int | None, _KeyMatch | None]:
        section_index = self._find_section(section)
        if section_index is None:
            return None, None
        wanted = _ascii_upper(key)
        for index in range(section_index + 1, len(self.entries)):
            entry = self.entries[index]
            if entry.type is EntryType.SECTION:
                break
            if entry.type is not EntryType.KEY_VALUE:
                continue
            code, sep, rest = entry.text.partition(";")
            comment = sep + rest
            if "=" not in code:
                continue
            key_text, _, value = code.partition("=")
            if _ascii_upper(key_text) == wanted:
                return section_index, _KeyMatch(index, key_text, value, comment)
        return section_index, None

    # -- reading ----------------------------------------------------------

    def read_string(self, section, key, default):
        """Return the raw value of ``key`` in ``section``, or ``default``."""
        if section is None or key is None or default is None:
            return default
        _, match = self._find_key(section, key)
        return match.value if match is not None else default

    def read_bool(self, section, key, default):
        """Return True when the value reads as a non-zero integer."""
        return _atoi(self.read_string(section, key, "1" if default else "0")) != 0

    def read_int(self, section, key, default):
        """Return the leading integer of the value; 0 when there is none."""
        return _atoi(self.read_string(section, key, str(int(default))))

    def read_float(self, section, key, default):
        """Return the leading number of the value.

        A missing key yields ``default`` as written with ten decimals in
        scientific notation; a value with no number in it yields ``default``.
        """
        text = self.read_string(section, key, _format_float(default))
        match = _FLOAT_RE.match(text)
        return float(match.group(1)) if match else float(default)

    def sections(self):
        """Return the section header lines, brackets included, in file order."""
        return [e.text for e in self.entries if e.type is EntryType.SECTION]

    # -- writing ----------------------------------------------------------

    def write_string(self, section, key, value):
        """Set ``key`` in ``section``, creating either when missing.

        An existing key keeps its spelling and any trailing comment. A new
        key goes right after its section header; a new section is appended
        at the end of the file.
        """
        if section is None or key is None or value is None:
            return
        section_index, match = self._find_key(section, key)
        if match is not None:
            old = self.entries[match.index]
            self.entries[match.index] = replace(
                old, text=f"{match.key_text}={value}{match.comment}"
            )
        elif section_index is not None:
            self.entries.insert(
                section_index + 1, Entry(EntryType.KEY_VALUE, f"{key}={value}")
            )
        else:
            self.entries.append(Entry(EntryType.SECTION, f"[{section}]"))
            self.entries.append(Entry(EntryType.KEY_VALUE, f"{key}={value}"))

    def write_bool(self, section, key, value):
        """Store a boolean as ``1`` or ``0``."""
        self.write_string(section, key, "1" if value else "0")

    def write_int(self, section, key, value):
        """Store an integer in decimal."""
        self.write_string(section, key, str(int(value)))

    def write_float(self, section, key, value):
        """Store a number with ten decimals in scientific notation."""
        self.write_string(section, key, _format_float(value))

    def delete_key(self, section, key):
        """Remove ``key`` from ``section``; return whether it was there."""
        _, match = self._find_key(section, key)
        if match is None:
            return False
        del self.entries[match.index]
        return True

    # -- output -----------------------------------------------------------

    def to_text(self):
        """Return the document with every line ended by a newline."""
        return "".join(f"{entry.text}\n" for entry in self.entries)

    def save(self, path):
        """Write the document to ``path``."""
        with open(path, "wb") as handle:
            handle.write(self.to_text().encode(_ENCODING, _ERRORS))


def parse(text):
    """Build an :class:`IniFile` from the text of a file."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return IniFile([Entry.from_line(line) for line in lines])


def load(path: str | os.PathLike[str]) -> IniFile:
    """Read and parse the file at ``path``; raises OSError if it cannot be read."""
    with open(path, "rb") as handle:
        data = handle.read()
    return parse(data.decode(_ENCODING, _ERRORS))
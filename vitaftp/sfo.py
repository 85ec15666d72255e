"""Lookup of string values in a ``param.sfo`` file."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

__all__ = ["SfoError", "SfoHeader", "SfoEntry", "get_string", "SFO_MAGIC"]

SFO_MAGIC = 0x46535000


class SfoError(ValueError):
    """Raised when a buffer is not a valid param.sfo."""


@dataclass(frozen=True)
class SfoHeader:
    """The fixed header at the start of a param.sfo."""

    FORMAT: ClassVar[str] = "<5I"
    SIZE: ClassVar[int] = struct.calcsize("<5I")

    magic: int
    version: int
    key_offset: int
    value_offset: int
    count: int


@dataclass(frozen=True)
class SfoEntry:
    """One index entry of a param.sfo."""

    FORMAT: ClassVar[str] = "<HBBIII"
    SIZE: ClassVar[int] = struct.calcsize("<HBBIII")

    name_offset: int
    alignment: int
    type: int
    value_size: int
    total_size: int
    data_offset: int


def _c_string(buffer: bytes, offset: int) -> bytes:
    if offset >= len(buffer):
        raise SfoError("truncated param.sfo")
    end = buffer.find(b"\x00", offset)
    return buffer[offset:] if end < 0 else buffer[offset:end]


def _entries(buffer: bytes, header: SfoHeader):
    for index in range(header.count):
        start = SfoHeader.SIZE + index * SfoEntry.SIZE
        yield SfoEntry(*struct.unpack_from(SfoEntry.FORMAT, buffer, start))


def get_string(buffer, name):
    """Return the value stored under ``name``, or None when there is none.

    Raises :class:`SfoError` when the buffer is truncated or has the wrong magic.
    """
    data = bytes(buffer)
    if len(data) < SfoHeader.SIZE:
        raise SfoError("truncated param.sfo")
    header = SfoHeader(*struct.unpack_from(SfoHeader.FORMAT, data, 0))
    if header.magic != SFO_MAGIC:
        raise SfoError("can't parse SFO, invalid magic")
    if len(data) < SfoHeader.SIZE + header.count * SfoEntry.SIZE:
        raise SfoError("truncated param.sfo")

    wanted = name.encode("utf-8") if isinstance(name, str) else bytes(name)
    for entry in _entries(data, header):
        key = _c_string(data, header.key_offset + entry.name_offset)
        if key == wanted:
            value = _c_string(data, header.value_offset + entry.data_offset)
            return value.decode("utf-8", "replace")
    return None
"""SHA-1 message digest (FIPS 180-2), computed in pure Python."""

from __future__ import annotations

import struct

__all__ = ["Sha1", "sha1", "DIGEST_SIZE", "BLOCK_SIZE"]

DIGEST_SIZE = 20
BLOCK_SIZE = 64

_MASK = 0xFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
_ROUND_CONSTANTS = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & _MASK


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    words = list(struct.unpack(">16I", block))
    for i in range(16, 80):
        words.append(_rotl(words[i - 3] ^ words[i - 8] ^ words[i - 14] ^ words[i - 16], 1))

    a, b, c, d, e = state
    for i, word in enumerate(words):
        if i < 20:
            f = (b & c) ^ (~b & d)
            k = _ROUND_CONSTANTS[0]
        elif i < 40:
            f = b ^ c ^ d
            k = _ROUND_CONSTANTS[1]
        elif i < 60:
            f = (b & c) ^ (b & d) ^ (c & d)
            k = _ROUND_CONSTANTS[2]
        else:
            f = b ^ c ^ d
            k = _ROUND_CONSTANTS[3]
        temp = (_rotl(a, 5) + f + e + k + word) & _MASK
        e, d, c, b, a = d, c, _rotl(b, 30), a, temp

    return tuple((x + y) & _MASK for x, y in zip(state, (a, b, c, d, e)))


class Sha1:
    """Incremental SHA-1 hasher.

    ``digest`` may be called any number of times; it does not disturb the
    running state, so more data can be fed afterwards.
    """

    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state: tuple[int, ...] = _INITIAL_STATE
        self._pending = bytearray()
        self._length = 0
        if data:
            self.update(data)

    def update(self, data) -> None:
        """Feed more bytes into the hash."""
        chunk = memoryview(data).cast("B")
        self._length += len(chunk)
        self._pending.extend(chunk)
        whole = len(self._pending) - len(self._pending) % BLOCK_SIZE
        state = self._state
        for start in range(0, whole, BLOCK_SIZE):
            state = _compress(state, bytes(self._pending[start:start + BLOCK_SIZE]))
        self._state = state
        del self._pending[:whole]

    def digest(self) -> bytes:
        """Return the 20-byte digest of everything fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        tail = bytes(self._pending) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % BLOCK_SIZE)
        tail += struct.pack(">Q", bit_length)
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[start:start + BLOCK_SIZE])
        return struct.pack(">5I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def sha1(data) -> bytes:
    """Return the SHA-1 digest of ``data`` in one call."""
    return Sha1(data).digest()
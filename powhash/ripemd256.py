"""RIPEMD-256 message digest: RIPEMD-128 widened to two 128-bit lines."""

from __future__ import annotations

import struct
from typing import Sequence

from .ripemd128 import _LEFT_ROUNDS, _RIGHT_ROUNDS, _Round
from .ripemd160 import _rotl

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_DIGEST_SIZE = 32
_INITIAL_STATE = (
    0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476,
    0x76543210, 0xFEDCBA98, 0x89ABCDEF, 0x01234567,
)


def _round(words: tuple[int, ...], x: Sequence[int], spec: _Round) -> tuple[int, ...]:
    func, constant, order, shifts = spec
    a, b, c, d = words
    for word, shift in zip(order, shifts):
        t = _rotl((a + func(b, c, d) + x[word] + constant) & _MASK, shift)
        a, b, c, d = d, t, b, c
    return a, b, c, d


def _transform(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    x = struct.unpack("<16I", block)
    left = list(state[:4])
    right = list(state[4:])
    # After each round one word is exchanged between the two lines.
    for swap, (left_spec, right_spec) in enumerate(zip(_LEFT_ROUNDS, _RIGHT_ROUNDS)):
        left = list(_round(tuple(left), x, left_spec))
        right = list(_round(tuple(right), x, right_spec))
        left[swap], right[swap] = right[swap], left[swap]
    return tuple((s + t) & _MASK for s, t in zip(state, left + right))


class Ripemd256:
    """Incremental RIPEMD-256 hashing."""

    digest_size = _DIGEST_SIZE
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state = _INITIAL_STATE
        self._count = 0
        self._buffer = bytearray()
        self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        view = memoryview(data)
        self._count += view.nbytes
        self._buffer += view
        full = len(self._buffer) - len(self._buffer) % _BLOCK_SIZE
        for start in range(0, full, _BLOCK_SIZE):
            self._state = _transform(self._state, bytes(self._buffer[start:start + _BLOCK_SIZE]))
        del self._buffer[:full]

    def digest(self) -> bytes:
        """Return the digest of everything fed so far; the state is left intact."""
        tail = bytes(self._buffer) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % _BLOCK_SIZE)
        tail += struct.pack("<Q", (self._count * 8) & 0xFFFFFFFFFFFFFFFF)
        state = self._state
        for start in range(0, len(tail), _BLOCK_SIZE):
            state = _transform(state, tail[start:start + _BLOCK_SIZE])
        return struct.pack("<8I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self.digest().hex()


def ripemd256(data: bytes) -> bytes:
    """Return the RIPEMD-256 digest of ``data``."""
    return Ripemd256(data).digest()
"""RIPEMD-128 message digest."""

from __future__ import annotations

import struct
from typing import Callable, Sequence

from .ripemd160 import (
    _LEFT_ORDER,
    _LEFT_SHIFTS,
    _RIGHT_ORDER,
    _RIGHT_SHIFTS,
    _f,
    _g,
    _h,
    _i,
    _rotl,
)

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_DIGEST_SIZE = 16
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_Round = tuple[Callable[[int, int, int], int], int, Sequence[int], Sequence[int]]

_LEFT_ROUNDS: tuple[_Round, ...] = tuple(
    zip(
        (_f, _g, _h, _i),
        (0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC),
        _LEFT_ORDER[:4],
        _LEFT_SHIFTS[:4],
    )
)

_RIGHT_ROUNDS: tuple[_Round, ...] = tuple(
    zip(
        (_i, _h, _g, _f),
        (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x00000000),
        _RIGHT_ORDER[:4],
        _RIGHT_SHIFTS[:4],
    )
)


def _line(state: tuple[int, ...], x: Sequence[int], rounds: tuple[_Round, ...]) -> tuple[int, ...]:
    a, b, c, d = state
    for func, constant, order, shifts in rounds:
        for word, shift in zip(order, shifts):
            t = _rotl((a + func(b, c, d) + x[word] + constant) & _MASK, shift)
            a, b, c, d = d, t, b, c
    return a, b, c, d


def _transform(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    x = struct.unpack("<16I", block)
    al, bl, cl, dl = _line(state, x, _LEFT_ROUNDS)
    ar, br, cr, dr = _line(state, x, _RIGHT_ROUNDS)
    h0, h1, h2, h3 = state
    return (
        (h1 + cl + dr) & _MASK,
        (h2 + dl + ar) & _MASK,
        (h3 + al + br) & _MASK,
        (h0 + bl + cr) & _MASK,
    )


class Ripemd128:
    """Incremental RIPEMD-128 hashing."""

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
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self.digest().hex()


def ripemd128(data: bytes) -> bytes:
    """Return the RIPEMD-128 digest of ``data``."""
    return Ripemd128(data).digest()
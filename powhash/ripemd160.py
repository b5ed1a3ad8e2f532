"""RIPEMD-160 message digest."""

from __future__ import annotations

import struct
from typing import Callable, Sequence

from .has160 import _md_engine

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_DIGEST_SIZE = 20
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

_LEFT_ORDER = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8),
    (3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12),
    (1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2),
    (4, 0, 5, 9, 7, 12, 2, 10, 14, 1, 3, 8, 11, 6, 15, 13),
)

_LEFT_SHIFTS = (
    (11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8),
    (7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12),
    (11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5),
    (11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12),
    (9, 15, 5, 11, 6, 8, 13, 12, 5, 12, 13, 14, 11, 8, 5, 6),
)

_RIGHT_ORDER = (
    (5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12),
    (6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2),
    (15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13),
    (8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14),
    (12, 15, 10, 4, 1, 5, 8, 7, 6, 2, 13, 14, 0, 3, 9, 11),
)

_RIGHT_SHIFTS = (
    (8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6),
    (9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11),
    (9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5),
    (15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8),
    (8, 5, 12, 9, 12, 5, 14, 6, 8, 13, 6, 5, 15, 13, 11, 11),
)


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _f(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _g(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & z)


def _h(x: int, y: int, z: int) -> int:
    return ((x | (~y & _MASK)) ^ z) & _MASK


def _i(x: int, y: int, z: int) -> int:
    return (x & z) | (y & ~z & _MASK)


def _j(x: int, y: int, z: int) -> int:
    return (x ^ (y | (~z & _MASK))) & _MASK


_Round = tuple[Callable[[int, int, int], int], int, Sequence[int], Sequence[int]]

_LEFT_ROUNDS: tuple[_Round, ...] = tuple(
    zip(
        (_f, _g, _h, _i, _j),
        (0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xA953FD4E),
        _LEFT_ORDER,
        _LEFT_SHIFTS,
    )
)

_RIGHT_ROUNDS: tuple[_Round, ...] = tuple(
    zip(
        (_j, _i, _h, _g, _f),
        (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x7A6D76E9, 0x00000000),
        _RIGHT_ORDER,
        _RIGHT_SHIFTS,
    )
)


def _line(state: tuple[int, ...], x: Sequence[int], rounds: tuple[_Round, ...]) -> tuple[int, ...]:
    a, b, c, d, e = state
    for func, constant, order, shifts in rounds:
        for word, shift in zip(order, shifts):
            t = (_rotl((a + func(b, c, d) + x[word] + constant) & _MASK, shift) + e) & _MASK
            a, b, c, d, e = e, t, b, _rotl(c, 10), d
    return a, b, c, d, e


def _transform(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    x = struct.unpack("<16I", block)
    al, bl, cl, dl, el = _line(state, x, _LEFT_ROUNDS)
    ar, br, cr, dr, er = _line(state, x, _RIGHT_ROUNDS)
    h0, h1, h2, h3, h4 = state
    return (
        (h1 + cl + dr) & _MASK,
        (h2 + dl + er) & _MASK,
        (h3 + el + ar) & _MASK,
        (h4 + al + br) & _MASK,
        (h0 + bl + cr) & _MASK,
    )


class Ripemd160:
    """Incremental RIPEMD-160 hashing."""

    digest_size = _DIGEST_SIZE
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._engine = _md_engine(_transform, _INITIAL_STATE)
        self._engine.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        self._engine.update(data)

    def digest(self) -> bytes:
        """Return the digest of everything fed so far; the state is left intact."""
        return self._engine.digest()

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self._engine.digest().hex()


def ripemd160(data: bytes) -> bytes:
    """Return the RIPEMD-160 digest of ``data``."""
    return Ripemd160(data).digest()
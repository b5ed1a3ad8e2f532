"""MD4 message digest as described in RFC 1320."""

from __future__ import annotations

import struct

from .has160 import _md_engine

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_DIGEST_SIZE = 16
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _f(b: int, c: int, d: int) -> int:
    return (b & c) | (~b & d)


def _g(b: int, c: int, d: int) -> int:
    return (b & c) | (b & d) | (c & d)


def _h(b: int, c: int, d: int) -> int:
    return b ^ c ^ d


# (boolean function, additive constant, rotations, message word order)
_ROUNDS = (
    (_f, 0x00000000, (3, 7, 11, 19), tuple(range(16))),
    (_g, 0x5A827999, (3, 5, 9, 13), (0, 4, 8, 12, 1, 5, 9, 13, 2, 6, 10, 14, 3, 7, 11, 15)),
    (_h, 0x6ED9EBA1, (3, 9, 11, 15), (0, 8, 4, 12, 2, 10, 6, 14, 1, 9, 5, 13, 3, 11, 7, 15)),
)


def _transform(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    x = struct.unpack("<16I", block)
    v = list(state)
    for func, constant, shifts, order in _ROUNDS:
        for step, word in enumerate(order):
            a, b, c, d = ((k - step) % 4 for k in range(4))
            total = (v[a] + func(v[b], v[c], v[d]) + x[word] + constant) & _MASK
            v[a] = _rotl(total, shifts[step % 4])
    return tuple((s + t) & _MASK for s, t in zip(state, v))


class Md4:
    """Incremental MD4 hashing."""

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


def md4(data: bytes) -> bytes:
    """Return the MD4 digest of ``data``."""
    return Md4(data).digest()
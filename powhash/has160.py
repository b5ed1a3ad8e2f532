"""HAS-160, the Korean standard 160-bit message digest.

The module also holds the block buffering and length padding shared by the
other 64-byte-block digests of the package.
"""

from __future__ import annotations

import struct
from typing import Any, Callable

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_DIGEST_SIZE = 20
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

_Compress = Callable[[Any, bytes], Any]
_Finish = Callable[[Any, bytes, int], bytes]


class _BlockEngine:
    """Buffers input and feeds whole blocks to a compression function."""

    def __init__(self, block_size: int, compress: _Compress, finish: _Finish, state: Any) -> None:
        self._block_size = block_size
        self._compress = compress
        self._finish = finish
        self._state = state
        self._count = 0
        self._buffer = bytearray()

    def update(self, data: bytes) -> None:
        view = memoryview(data)
        self._count += view.nbytes
        self._buffer += view
        size = self._block_size
        full = len(self._buffer) - len(self._buffer) % size
        for start in range(0, full, size):
            self._state = self._compress(self._state, bytes(self._buffer[start:start + size]))
        del self._buffer[:full]

    def digest(self) -> bytes:
        """Finish a copy of the state; the engine itself is left intact."""
        return self._finish(self._state, bytes(self._buffer), self._count)


def _md_finish(compress: _Compress) -> _Finish:
    """Padding with 0x80, zeros and a little-endian 64-bit bit count."""

    def finish(state: tuple[int, ...], tail: bytes, count: int) -> bytes:
        tail += b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % _BLOCK_SIZE)
        tail += struct.pack("<Q", (count * 8) & 0xFFFFFFFFFFFFFFFF)
        for start in range(0, len(tail), _BLOCK_SIZE):
            state = compress(state, tail[start:start + _BLOCK_SIZE])
        return struct.pack(f"<{len(state)}I", *state)

    return finish


def _md_engine(compress: _Compress, initial_state: tuple[int, ...]) -> _BlockEngine:
    return _BlockEngine(_BLOCK_SIZE, compress, _md_finish(compress), initial_state)


# Words 16..31 are each the XOR of four message words.
_EXPANSION = (
    (0, 1, 2, 3), (4, 5, 6, 7), (8, 9, 10, 11), (12, 13, 14, 15),
    (3, 6, 9, 12), (2, 5, 8, 15), (1, 4, 11, 14), (0, 7, 10, 13),
    (5, 7, 12, 14), (0, 2, 9, 11), (4, 6, 13, 15), (1, 3, 8, 10),
    (2, 7, 8, 13), (3, 4, 9, 14), (0, 5, 10, 15), (1, 6, 11, 12),
)

_SHIFTS = (5, 11, 7, 15, 6, 13, 8, 14, 7, 12, 9, 11, 8, 15, 6, 12, 9, 14, 5, 13)


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _f1(b: int, c: int, d: int) -> int:
    return d ^ (b & (c ^ d))


def _f2(b: int, c: int, d: int) -> int:
    return b ^ c ^ d


def _f3(b: int, c: int, d: int) -> int:
    return c ^ (b | (~d & _MASK))


# (boolean function, additive constant, rotation of B, message word order)
_ROUNDS = (
    (_f1, 0x00000000, 10,
     (18, 0, 1, 2, 3, 19, 4, 5, 6, 7, 16, 8, 9, 10, 11, 17, 12, 13, 14, 15)),
    (_f2, 0x5A827999, 17,
     (22, 3, 6, 9, 12, 23, 15, 2, 5, 8, 20, 11, 14, 1, 4, 21, 7, 10, 13, 0)),
    (_f3, 0x6ED9EBA1, 25,
     (26, 12, 5, 14, 7, 27, 0, 9, 2, 11, 24, 4, 13, 6, 15, 25, 8, 1, 10, 3)),
    (_f2, 0x8F1BBCDC, 30,
     (30, 7, 2, 13, 8, 31, 3, 14, 9, 4, 28, 15, 10, 5, 0, 29, 11, 6, 1, 12)),
)


def _transform(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    x = list(struct.unpack("<16I", block))
    x.extend(x[a] ^ x[b] ^ x[c] ^ x[d] for a, b, c, d in _EXPANSION)

    v = list(state)
    for func, constant, b_shift, order in _ROUNDS:
        for step, (word, shift) in enumerate(zip(order, _SHIFTS)):
            a, b, c, d, e = ((k - step) % 5 for k in range(5))
            v[e] = (v[e] + _rotl(v[a], shift) + func(v[b], v[c], v[d]) + x[word] + constant) & _MASK
            v[b] = _rotl(v[b], b_shift)

    return tuple((s + t) & _MASK for s, t in zip(state, v))


class Has160:
    """Incremental HAS-160 hashing."""

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


def has160(data: bytes) -> bytes:
    """Return the HAS-160 digest of ``data``."""
    return Has160(data).digest()
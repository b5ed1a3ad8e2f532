"""MD5 message digest as described in RFC 1321."""

from __future__ import annotations

import struct

from .has160 import _md_engine

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_DIGEST_SIZE = 16
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE, 0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE, 0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA, 0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED, 0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C, 0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05, 0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039, 0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1, 0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _f(b: int, c: int, d: int) -> int:
    return (b & c) | (~b & d)


def _g(b: int, c: int, d: int) -> int:
    return (b & d) | (c & ~d & _MASK)


def _h(b: int, c: int, d: int) -> int:
    return b ^ c ^ d


def _i(b: int, c: int, d: int) -> int:
    return c ^ (b | (~d & _MASK))


# (boolean function, rotations, message word for each of the 16 steps)
_ROUNDS = (
    (_f, (7, 12, 17, 22), tuple(range(16))),
    (_g, (5, 9, 14, 20), tuple((1 + 5 * i) % 16 for i in range(16))),
    (_h, (4, 11, 16, 23), tuple((5 + 3 * i) % 16 for i in range(16))),
    (_i, (6, 10, 15, 21), tuple((7 * i) % 16 for i in range(16))),
)


def _transform(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    x = struct.unpack("<16I", block)
    v = list(state)
    constants = iter(_K)
    for func, shifts, order in _ROUNDS:
        for step, word in enumerate(order):
            a, b, c, d = ((k - step) % 4 for k in range(4))
            total = (v[a] + func(v[b], v[c], v[d]) + x[word] + next(constants)) & _MASK
            v[a] = (_rotl(total, shifts[step % 4]) + v[b]) & _MASK
    return tuple((s + t) & _MASK for s, t in zip(state, v))


class Md5:
    """Incremental MD5 hashing."""

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


def md5(data: bytes) -> bytes:
    """Return the MD5 digest of ``data``."""
    return Md5(data).digest()
"""Original Keccak digests (0x01 domain padding, unlike SHA-3's 0x06)."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFFFFFFFFFF
_DIGEST_SIZES = (28, 32, 48, 64)

_RHO = (
    0, 1, 62, 28, 27,
    36, 44, 6, 55, 20,
    3, 10, 43, 25, 39,
    41, 45, 15, 21, 8,
    18, 2, 61, 56, 14,
)

# Lane that moves into each position during the pi step.
_PI_SOURCE = (
    0, 6, 12, 18, 24,
    3, 9, 10, 16, 22,
    1, 7, 13, 19, 20,
    4, 5, 11, 17, 23,
    2, 8, 14, 15, 21,
)


def _rc_bit(t: int) -> int:
    register = 1
    for _ in range(t % 255):
        register <<= 1
        if register & 0x100:
            register ^= 0x171
    return register & 1


def _round_constants() -> tuple[int, ...]:
    return tuple(
        sum(_rc_bit(j + 7 * rnd) << ((1 << j) - 1) for j in range(7))
        for rnd in range(24)
    )


_ROUND_CONSTANTS = _round_constants()


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (64 - n))) & _MASK if n else x


def _permute(state: list[int]) -> list[int]:
    a = state
    for constant in _ROUND_CONSTANTS:
        c = [a[i] ^ a[i + 5] ^ a[i + 10] ^ a[i + 15] ^ a[i + 20] for i in range(5)]
        d = [c[(i + 4) % 5] ^ _rotl(c[(i + 1) % 5], 1) for i in range(5)]
        a = [lane ^ d[i % 5] for i, lane in enumerate(a)]
        b = [_rotl(a[src], _RHO[src]) for src in _PI_SOURCE]
        a = [
            b[row + i] ^ (~b[row + (i + 1) % 5] & _MASK & b[row + (i + 2) % 5])
            for row in range(0, 25, 5)
            for i in range(5)
        ]
        a[0] ^= constant
    return a


def _absorb(state: list[int], block: bytes) -> list[int]:
    lanes = struct.unpack(f"<{len(block) // 8}Q", block)
    mixed = [lane ^ word for lane, word in zip(state, lanes)] + state[len(lanes):]
    return _permute(mixed)


class Keccak:
    """Incremental Keccak hashing with a 28, 32, 48 or 64 byte digest."""

    def __init__(self, digest_size: int, data: bytes = b"") -> None:
        if digest_size not in _DIGEST_SIZES:
            raise ValueError(f"digest_size must be one of {_DIGEST_SIZES}, got {digest_size}")
        self.digest_size = digest_size
        self.block_size = (1600 - 2 * 8 * digest_size) // 8
        self._state = [0] * 25
        self._buffer = bytearray()
        self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        self._buffer += memoryview(data)
        rate = self.block_size
        full = len(self._buffer) - len(self._buffer) % rate
        for start in range(0, full, rate):
            self._state = _absorb(self._state, bytes(self._buffer[start:start + rate]))
        del self._buffer[:full]

    def digest(self) -> bytes:
        """Return the digest of everything fed so far; the state is left intact."""
        rate = self.block_size
        block = bytearray(self._buffer) + b"\x01"
        block += bytes(rate - len(block))
        block[-1] |= 0x80
        state = _absorb(self._state, bytes(block))
        return struct.pack("<25Q", *state)[: self.digest_size]

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self.digest().hex()


def keccak_224(data: bytes) -> bytes:
    """Return the Keccak-224 digest of ``data``."""
    return Keccak(28, data).digest()


def keccak_384(data: bytes) -> bytes:
    """Return the Keccak-384 digest of ``data``."""
    return Keccak(48, data).digest()


def keccak_512(data: bytes) -> bytes:
    """Return the Keccak-512 digest of ``data``."""
    return Keccak(64, data).digest()
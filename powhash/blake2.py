"""BLAKE2b and BLAKE2s message digests as described in RFC 7693."""

from __future__ import annotations

import struct
from dataclasses import dataclass

_SIGMA = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
    (11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4),
    (7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8),
    (9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13),
    (2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9),
    (12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11),
    (13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10),
    (6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5),
    (10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0),
)

# Column steps followed by diagonal steps.
_LANES = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)


@dataclass(frozen=True)
class _Variant:
    word_bits: int
    block_size: int
    max_digest: int
    max_key: int
    rounds: int
    rotations: tuple[int, int, int, int]
    iv: tuple[int, ...]
    word_format: str

    @property
    def mask(self) -> int:
        return (1 << self.word_bits) - 1


_BLAKE2B = _Variant(
    word_bits=64,
    block_size=128,
    max_digest=64,
    max_key=64,
    rounds=12,
    rotations=(32, 24, 16, 63),
    iv=(
        0x6A09E667F3BCC908, 0xBB67AE8584CAA73B,
        0x3C6EF372FE94F82B, 0xA54FF53A5F1D36F1,
        0x510E527FADE682D1, 0x9B05688C2B3E6C1F,
        0x1F83D9ABFB41BD6B, 0x5BE0CD19137E2179,
    ),
    word_format="<16Q",
)

_BLAKE2S = _Variant(
    word_bits=32,
    block_size=64,
    max_digest=32,
    max_key=32,
    rounds=10,
    rotations=(16, 12, 8, 7),
    iv=(
        0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
        0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
    ),
    word_format="<16I",
)


def _compress(variant: _Variant, h: list[int], block: bytes, counter: int, last: bool) -> list[int]:
    w = variant.word_bits
    mask = variant.mask
    r1, r2, r3, r4 = variant.rotations

    def rotr(x: int, n: int) -> int:
        return ((x >> n) | (x << (w - n))) & mask

    m = struct.unpack(variant.word_format, block)
    v = list(h) + list(variant.iv)
    v[12] ^= counter & mask
    v[13] ^= (counter >> w) & mask
    if last:
        v[14] ^= mask

    for rnd in range(variant.rounds):
        sigma = _SIGMA[rnd % 10]
        for step, (a, b, c, d) in enumerate(_LANES):
            x = m[sigma[2 * step]]
            y = m[sigma[2 * step + 1]]
            v[a] = (v[a] + v[b] + x) & mask
            v[d] = rotr(v[d] ^ v[a], r1)
            v[c] = (v[c] + v[d]) & mask
            v[b] = rotr(v[b] ^ v[c], r2)
            v[a] = (v[a] + v[b] + y) & mask
            v[d] = rotr(v[d] ^ v[a], r3)
            v[c] = (v[c] + v[d]) & mask
            v[b] = rotr(v[b] ^ v[c], r4)

    return [hi ^ lo ^ up for hi, lo, up in zip(h, v[:8], v[8:])]


class _Blake2State:
    """Incremental BLAKE2 state shared by both word sizes."""

    def __init__(self, variant: _Variant, digest_size: int, key: bytes) -> None:
        key = bytes(memoryview(key))
        if not 1 <= digest_size <= variant.max_digest:
            raise ValueError(
                f"digest_size must be between 1 and {variant.max_digest}, got {digest_size}"
            )
        if len(key) > variant.max_key:
            raise ValueError(f"key must be at most {variant.max_key} bytes, got {len(key)}")

        self._variant = variant
        self._digest_size = digest_size
        self._h = list(variant.iv)
        self._h[0] ^= 0x01010000 ^ (len(key) << 8) ^ digest_size
        self._counter = 0
        self._buffer = bytearray()
        if key:
            self.update(key.ljust(variant.block_size, b"\x00"))

    def update(self, data: bytes) -> None:
        self._buffer += memoryview(data)
        size = self._variant.block_size
        # The last full block is kept back so that it can be flagged as final.
        while len(self._buffer) > size:
            block = bytes(self._buffer[:size])
            del self._buffer[:size]
            self._counter += size
            self._h = _compress(self._variant, self._h, block, self._counter, last=False)

    def digest(self) -> bytes:
        variant = self._variant
        block = bytes(self._buffer).ljust(variant.block_size, b"\x00")
        counter = self._counter + len(self._buffer)
        h = _compress(variant, self._h, block, counter, last=True)
        out = struct.pack(variant.word_format[:1] + "8" + variant.word_format[-1], *h)
        return out[: self._digest_size]


class Blake2b:
    """BLAKE2b with a 1 to 64 byte digest and an optional key of up to 64 bytes."""

    block_size = _BLAKE2B.block_size

    def __init__(self, digest_size: int = 64, key: bytes = b"") -> None:
        self._state = _Blake2State(_BLAKE2B, digest_size, key)
        self.digest_size = digest_size

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        self._state.update(data)

    def digest(self) -> bytes:
        """Return the digest of everything fed so far; the state is left intact."""
        return self._state.digest()

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self._state.digest().hex()


class Blake2s:
    """BLAKE2s with a 1 to 32 byte digest and an optional key of up to 32 bytes."""

    block_size = _BLAKE2S.block_size

    def __init__(self, digest_size: int = 32, key: bytes = b"") -> None:
        self._state = _Blake2State(_BLAKE2S, digest_size, key)
        self.digest_size = digest_size

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        self._state.update(data)

    def digest(self) -> bytes:
        """Return the digest of everything fed so far; the state is left intact."""
        return self._state.digest()

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self._state.digest().hex()


def blake2b(data: bytes, digest_size: int = 64) -> bytes:
    """Return the unkeyed BLAKE2b digest of ``data``."""
    hasher = Blake2b(digest_size)
    hasher.update(data)
    return hasher.digest()


def blake2s(data: bytes, digest_size: int = 32) -> bytes:
    """Return the unkeyed BLAKE2s digest of ``data``."""
    hasher = Blake2s(digest_size)
    hasher.update(data)
    return hasher.digest()
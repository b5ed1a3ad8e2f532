"""Proof-of-work search over a prefix followed by a decimal nonce."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Union

from .blake2 import blake2b, blake2s
from .has160 import has160
from .keccak import Keccak, keccak_224, keccak_384, keccak_512
from .md2 import md2
from .md4 import md4
from .md5 import md5
from .nt import nt_hash
from .ripemd128 import ripemd128
from .ripemd160 import ripemd160
from .ripemd256 import ripemd256

_INT_MAX = 2**31 - 1
_MAX_ALGORITHMS = 10


class HashAlgorithm(Enum):
    """Digest algorithms a proof of work can be built on, named as on the wire."""

    MD2 = "MD2"
    MD4 = "MD4"
    MD5 = "MD5"
    SHA1 = "SHA-1"
    SHA224 = "SHA2-224"
    SHA256 = "SHA2-256"
    SHA384 = "SHA2-384"
    SHA512 = "SHA2-512"
    SHA3_224 = "SHA3-224"
    SHA3_256 = "SHA3-256"
    SHA3_384 = "SHA3-384"
    SHA3_512 = "SHA3-512"
    KECCAK_224 = "Keccak-224"
    KECCAK_256 = "Keccak-256"
    KECCAK_384 = "Keccak-384"
    KECCAK_512 = "Keccak-512"
    SHAKE128 = "SHAKE-128"
    SHAKE256 = "SHAKE-256"
    RIPEMD128 = "RIPEMD-128"
    RIPEMD160 = "RIPEMD-160"
    RIPEMD256 = "RIPEMD-256"
    BLAKE2B_128 = "BLAKE2b-128"
    BLAKE2B_160 = "BLAKE2b-160"
    BLAKE2B_256 = "BLAKE2b-256"
    BLAKE2B_384 = "BLAKE2b-384"
    BLAKE2B_512 = "BLAKE2b-512"
    BLAKE2S_128 = "BLAKE2s-128"
    BLAKE2S_160 = "BLAKE2s-160"
    BLAKE2S_256 = "BLAKE2s-256"
    HAS160 = "HAS-160"
    NT = "NT"

    @property
    def digest_size(self) -> int:
        """Length in bytes of the digest this algorithm produces."""
        return _DIGEST_SIZES[self]


_Hasher = Callable[[bytes], bytes]

_HASHERS: dict[HashAlgorithm, _Hasher] = {
    HashAlgorithm.MD2: md2,
    HashAlgorithm.MD4: md4,
    HashAlgorithm.MD5: md5,
    HashAlgorithm.SHA1: lambda data: hashlib.sha1(data).digest(),
    HashAlgorithm.SHA224: lambda data: hashlib.sha224(data).digest(),
    HashAlgorithm.SHA256: lambda data: hashlib.sha256(data).digest(),
    HashAlgorithm.SHA384: lambda data: hashlib.sha384(data).digest(),
    HashAlgorithm.SHA512: lambda data: hashlib.sha512(data).digest(),
    HashAlgorithm.SHA3_224: lambda data: hashlib.sha3_224(data).digest(),
    HashAlgorithm.SHA3_256: lambda data: hashlib.sha3_256(data).digest(),
    HashAlgorithm.SHA3_384: lambda data: hashlib.sha3_384(data).digest(),
    HashAlgorithm.SHA3_512: lambda data: hashlib.sha3_512(data).digest(),
    HashAlgorithm.KECCAK_224: keccak_224,
    HashAlgorithm.KECCAK_256: lambda data: Keccak(32, data).digest(),
    HashAlgorithm.KECCAK_384: keccak_384,
    HashAlgorithm.KECCAK_512: keccak_512,
    HashAlgorithm.SHAKE128: lambda data: hashlib.shake_128(data).digest(32),
    HashAlgorithm.SHAKE256: lambda data: hashlib.shake_256(data).digest(64),
    HashAlgorithm.RIPEMD128: ripemd128,
    HashAlgorithm.RIPEMD160: ripemd160,
    HashAlgorithm.RIPEMD256: ripemd256,
    HashAlgorithm.BLAKE2B_128: lambda data: blake2b(data, 16),
    HashAlgorithm.BLAKE2B_160: lambda data: blake2b(data, 20),
    HashAlgorithm.BLAKE2B_256: lambda data: blake2b(data, 32),
    HashAlgorithm.BLAKE2B_384: lambda data: blake2b(data, 48),
    HashAlgorithm.BLAKE2B_512: lambda data: blake2b(data, 64),
    HashAlgorithm.BLAKE2S_128: lambda data: blake2s(data, 16),
    HashAlgorithm.BLAKE2S_160: lambda data: blake2s(data, 20),
    HashAlgorithm.BLAKE2S_256: lambda data: blake2s(data, 32),
    HashAlgorithm.HAS160: has160,
    HashAlgorithm.NT: nt_hash,
}

_DIGEST_SIZES: dict[HashAlgorithm, int] = {
    HashAlgorithm.MD2: 16,
    HashAlgorithm.MD4: 16,
    HashAlgorithm.MD5: 16,
    HashAlgorithm.SHA1: 20,
    HashAlgorithm.SHA224: 28,
    HashAlgorithm.SHA256: 32,
    HashAlgorithm.SHA384: 48,
    HashAlgorithm.SHA512: 64,
    HashAlgorithm.SHA3_224: 28,
    HashAlgorithm.SHA3_256: 32,
    HashAlgorithm.SHA3_384: 48,
    HashAlgorithm.SHA3_512: 64,
    HashAlgorithm.KECCAK_224: 28,
    HashAlgorithm.KECCAK_256: 32,
    HashAlgorithm.KECCAK_384: 48,
    HashAlgorithm.KECCAK_512: 64,
    HashAlgorithm.SHAKE128: 32,
    HashAlgorithm.SHAKE256: 64,
    HashAlgorithm.RIPEMD128: 16,
    HashAlgorithm.RIPEMD160: 20,
    HashAlgorithm.RIPEMD256: 32,
    HashAlgorithm.BLAKE2B_128: 16,
    HashAlgorithm.BLAKE2B_160: 20,
    HashAlgorithm.BLAKE2B_256: 32,
    HashAlgorithm.BLAKE2B_384: 48,
    HashAlgorithm.BLAKE2B_512: 64,
    HashAlgorithm.BLAKE2S_128: 16,
    HashAlgorithm.BLAKE2S_160: 20,
    HashAlgorithm.BLAKE2S_256: 32,
    HashAlgorithm.HAS160: 20,
    HashAlgorithm.NT: 16,
}

_ALIASES = {
    "SHA256": HashAlgorithm.SHA256,
    "SHA1": HashAlgorithm.SHA1,
}

AlgorithmLike = Union[HashAlgorithm, str]


@dataclass(frozen=True)
class PowResult:
    """A nonce whose digest meets the difficulty, with that digest."""

    nonce: int
    algorithm: HashAlgorithm
    digest: bytes

    @property
    def hexdigest(self) -> str:
        return self.digest.hex()


@dataclass(frozen=True)
class MultiPowResult:
    """A nonce whose digests under every algorithm meet the difficulty."""

    nonce: int
    algorithms: tuple[HashAlgorithm, ...]
    digests: tuple[bytes, ...]

    @property
    def hexdigests(self) -> tuple[str, ...]:
        return tuple(digest.hex() for digest in self.digests)


def algorithm_by_name(name: str) -> HashAlgorithm:
    """Return the algorithm with the given wire name; raise ValueError if unknown."""
    if name in _ALIASES:
        return _ALIASES[name]
    try:
        return HashAlgorithm(name)
    except ValueError:
        raise ValueError(f"unknown hash algorithm: {name!r}") from None


def _resolve(algorithm: AlgorithmLike) -> HashAlgorithm:
    if isinstance(algorithm, HashAlgorithm):
        return algorithm
    return algorithm_by_name(algorithm)


def _encode(prefix: Union[str, bytes]) -> bytes:
    if isinstance(prefix, str):
        return prefix.encode("utf-8")
    return bytes(memoryview(prefix))


def compute_hash(algorithm: AlgorithmLike, data: bytes) -> bytes:
    """Return the digest of ``data`` under ``algorithm``."""
    return _HASHERS[_resolve(algorithm)](bytes(memoryview(data)))


def has_leading_zeros(digest: bytes, difficulty: int) -> bool:
    """Return whether ``digest`` starts with at least ``difficulty`` zero bits."""
    value = int.from_bytes(digest, "big")
    zero_bits = len(digest) * 8 - value.bit_length()
    return zero_bits >= difficulty


def _candidates(base: bytes, min_nonce: int, max_nonce: int) -> Iterable[tuple[int, bytes]]:
    for nonce in range(min_nonce, max_nonce + 1):
        yield nonce, base + str(nonce).encode("ascii")


def generate_pow_single(
    prefix: Union[str, bytes],
    algorithm: AlgorithmLike,
    difficulty: int,
    min_nonce: int = 0,
    max_nonce: int = _INT_MAX,
) -> Optional[PowResult]:
    """Find the smallest nonce in range whose digest has ``difficulty`` leading zero bits.

    Returns None when no nonce in ``[min_nonce, max_nonce]`` qualifies.
    """
    algo = _resolve(algorithm)
    for nonce, data in _candidates(_encode(prefix), min_nonce, max_nonce):
        digest = compute_hash(algo, data)
        if has_leading_zeros(digest, difficulty):
            return PowResult(nonce, algo, digest)
    return None


def generate_pow_multi(
    prefix: Union[str, bytes],
    algorithms: Iterable[AlgorithmLike],
    difficulty: int,
    min_nonce: int = 0,
    max_nonce: int = _INT_MAX,
) -> Optional[MultiPowResult]:
    """Find the smallest nonce whose digests all meet the difficulty.

    Only the first ten algorithms are used. Returns None when no nonce
    in ``[min_nonce, max_nonce]`` qualifies.
    """
    algos = tuple(_resolve(algo) for algo in list(algorithms)[:_MAX_ALGORITHMS])
    for nonce, data in _candidates(_encode(prefix), min_nonce, max_nonce):
        digests = []
        for algo in algos:
            digest = compute_hash(algo, data)
            if not has_leading_zeros(digest, difficulty):
                break
            digests.append(digest)
        else:
            return MultiPowResult(nonce, algos, tuple(digests))
    return None
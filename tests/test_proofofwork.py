import hashlib

import pytest

from powhash.md5 import md5
from powhash.nt import nt_hash
from powhash.proofofwork import (
    HashAlgorithm,
    MultiPowResult,
    PowResult,
    algorithm_by_name,
    compute_hash,
    generate_pow_multi,
    generate_pow_single,
    has_leading_zeros,
)

SOURCE_SIZES = {
    "MD2": 16, "MD4": 16, "MD5": 16, "SHA-1": 20, "SHA2-224": 28,
    "SHA2-256": 32, "SHA2-384": 48, "SHA2-512": 64, "SHA3-224": 28,
    "SHA3-256": 32, "SHA3-384": 48, "SHA3-512": 64, "Keccak-224": 28,
    "Keccak-256": 32, "Keccak-384": 48, "Keccak-512": 64, "SHAKE-128": 32,
    "SHAKE-256": 64, "RIPEMD-128": 16, "RIPEMD-160": 20, "RIPEMD-256": 32,
    "BLAKE2b-128": 16, "BLAKE2b-160": 20, "BLAKE2b-256": 32,
    "BLAKE2b-384": 48, "BLAKE2b-512": 64, "BLAKE2s-128": 16,
    "BLAKE2s-160": 20, "BLAKE2s-256": 32, "HAS-160": 20, "NT": 16,
}


@pytest.mark.parametrize("name,size", sorted(SOURCE_SIZES.items()))
def test_digest_sizes(name, size):
    algo = algorithm_by_name(name)
    assert len(compute_hash(algo, b"Hello World")) == size
    assert algo.digest_size == size


def test_matches_reference_digests():
    data = b"abc"
    assert compute_hash(HashAlgorithm.SHA256, data) == hashlib.sha256(data).digest()
    assert compute_hash(HashAlgorithm.MD5, data) == hashlib.md5(data).digest()
    assert compute_hash(HashAlgorithm.SHAKE128, data) == hashlib.shake_128(data).digest(32)
    assert compute_hash(HashAlgorithm.BLAKE2B_256, data) == hashlib.blake2b(data, digest_size=32).digest()


def test_nt_uses_nt_hash():
    assert compute_hash(HashAlgorithm.NT, b"password") == nt_hash(b"password")


def test_compute_hash_accepts_name():
    assert compute_hash("MD5", b"xyz") == md5(b"xyz")


def test_has_leading_zeros():
    assert has_leading_zeros(b"\x00\x0f", 12)
    assert not has_leading_zeros(b"\x00\x0f", 13)
    assert has_leading_zeros(b"\x80", 0)
    assert not has_leading_zeros(b"\x80", 1)
    assert has_leading_zeros(b"", 0)
    assert not has_leading_zeros(b"", 1)
    assert has_leading_zeros(b"\x00\x00", 16)
    assert not has_leading_zeros(b"\x00\x00", 17)


def test_algorithm_by_name_round_trip():
    for algo in HashAlgorithm:
        assert algorithm_by_name(algo.value) is algo


def test_algorithm_aliases():
    assert algorithm_by_name("SHA256") is algorithm_by_name("SHA2-256")
    assert algorithm_by_name("SHA1") is algorithm_by_name("SHA-1")


def test_unknown_algorithm():
    with pytest.raises(ValueError):
        algorithm_by_name("md5")
    with pytest.raises(ValueError):
        compute_hash("nope", b"")


def test_single_finds_smallest_nonce():
    result = generate_pow_single("challenge", HashAlgorithm.MD5, 6, 0, 5000)
    assert isinstance(result, PowResult)
    assert 0 <= result.nonce <= 5000
    data = b"challenge" + str(result.nonce).encode()
    assert result.digest == compute_hash(HashAlgorithm.MD5, data)
    assert has_leading_zeros(result.digest, 6)
    assert result.hexdigest == result.digest.hex()
    for nonce in range(result.nonce):
        assert not has_leading_zeros(md5(b"challenge" + str(nonce).encode()), 6)


def test_single_respects_min_nonce():
    result = generate_pow_single(b"seed", "MD4", 0, 42, 100)
    assert result.nonce == 42
    assert result.algorithm is HashAlgorithm.MD4


def test_single_not_found():
    assert generate_pow_single("seed", HashAlgorithm.MD5, 128, 0, 5) is None


def test_single_negative_nonce_is_formatted():
    result = generate_pow_single("p", HashAlgorithm.MD5, 0, -3, 3)
    assert result.nonce == -3
    assert result.digest == md5(b"p-3")


def test_multi_all_pass():
    algos = [HashAlgorithm.MD4, HashAlgorithm.MD5]
    result = generate_pow_multi("multi", algos, 3, 0, 5000)
    assert isinstance(result, MultiPowResult)
    assert result.algorithms == tuple(algos)
    data = b"multi" + str(result.nonce).encode()
    assert result.digests == tuple(compute_hash(a, data) for a in algos)
    assert all(has_leading_zeros(d, 3) for d in result.digests)
    for nonce in range(result.nonce):
        earlier = b"multi" + str(nonce).encode()
        assert not all(has_leading_zeros(compute_hash(a, earlier), 3) for a in algos)


def test_multi_empty_list_passes_first_nonce():
    result = generate_pow_multi("x", [], 20, 7, 10)
    assert result.nonce == 7
    assert result.digests == ()


def test_multi_uses_at_most_ten():
    algos = [HashAlgorithm.MD5] * 12
    result = generate_pow_multi("x", algos, 0, 0, 0)
    assert len(result.digests) == 10
    assert len(result.algorithms) == 10


def test_multi_not_found():
    assert generate_pow_multi("x", ["MD5", "MD4"], 128, 0, 3) is None
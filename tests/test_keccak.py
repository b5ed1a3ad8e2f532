import hashlib

import pytest

from powhash.keccak import Keccak, keccak_224, keccak_384, keccak_512


def test_keccak_224_empty_vector():
    assert keccak_224(b"").hex() == "f71837502ba8e10837bdd8d365adb85591895602fc552b48b7390abd"


def test_keccak_256_empty_vector():
    assert Keccak(32).hexdigest() == (
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )


def test_keccak_512_empty_vector():
    assert keccak_512(b"").hex() == (
        "0eab42de4c3ceb9235fc91acffe746b29c29a8c366b7c60e4e67c466f36a4304"
        "c00fa9caf9d87976ba469bcbe06713b435f091ef2769fb160cdab33d3670680e"
    )


@pytest.mark.parametrize(
    "func, size",
    [(keccak_224, 28), (keccak_384, 48), (keccak_512, 64)],
)
def test_digest_sizes(func, size):
    assert len(func(b"abc")) == size


@pytest.mark.parametrize("size, rate", [(28, 144), (32, 136), (48, 104), (64, 72)])
def test_rate_follows_capacity(size, rate):
    assert Keccak(size).block_size == rate


@pytest.mark.parametrize("size", [28, 32, 48, 64])
@pytest.mark.parametrize("chunk", [1, 5, 71, 72, 73, 144])
def test_incremental_matches_one_shot(size, chunk):
    data = bytes(range(256)) * 3
    hasher = Keccak(size)
    for start in range(0, len(data), chunk):
        hasher.update(data[start:start + chunk])
    assert hasher.digest() == Keccak(size, data).digest()


@pytest.mark.parametrize("size", [28, 48, 64])
def test_padding_boundaries_distinct(size):
    rate = Keccak(size).block_size
    lengths = [rate - 2, rate - 1, rate, rate + 1]
    digests = {Keccak(size, b"\x00" * n).digest() for n in lengths}
    assert len(digests) == len(lengths)


def test_differs_from_sha3():
    assert keccak_224(b"") != hashlib.sha3_224(b"").digest()
    assert keccak_384(b"") != hashlib.sha3_384(b"").digest()
    assert len(keccak_384(b"")) == len(hashlib.sha3_384(b"").digest())


def test_digest_does_not_disturb_state():
    hasher = Keccak(48, b"hello ")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"world")
    assert hasher.digest() == keccak_384(b"hello world")


def test_hexdigest_matches_digest():
    hasher = Keccak(64, b"abc")
    assert hasher.hexdigest() == hasher.digest().hex()
    assert hasher.digest() == keccak_512(b"abc")


@pytest.mark.parametrize("size", [0, 16, 20, 65])
def test_invalid_digest_size(size):
    with pytest.raises(ValueError):
        Keccak(size)
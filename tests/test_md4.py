import pytest

from powhash.md4 import Md4, md4


@pytest.mark.parametrize(
    "message, expected",
    [
        (b"", "31d6cfe0d16ae931b73c59d7e0c089c0"),
        (b"a", "bde52cb31de33e46245e05fbdbd6fb24"),
        (b"abc", "a448017aaf21d8525fc10ae87aa6729d"),
        (b"message digest", "d9130a8164549fe818874806e1c7014b"),
        (b"abcdefghijklmnopqrstuvwxyz", "d79e1c308aa5bbcdeea8ed63df412da9"),
    ],
)
def test_rfc_1320_vectors(message, expected):
    assert Md4(message).hexdigest() == expected


@pytest.mark.parametrize("split", [0, 1, 55, 56, 63, 64, 65, 128, 150])
def test_two_part_input(split):
    message = bytes(range(256)) * 2
    hasher = Md4(message[:split])
    hasher.update(message[split:])
    assert hasher.digest() == md4(message)


def test_digest_is_repeatable_and_extendable():
    hasher = Md4(b"abc")
    snapshot = hasher.digest()
    hasher.update(b"")
    assert hasher.digest() == snapshot == md4(b"abc")
    hasher.update(b"def")
    assert hasher.digest() == md4(b"abcdef")


def test_lengths_around_padding_boundary():
    digests = [md4(b"z" * n) for n in (55, 56, 63, 64, 119, 120)]
    assert len(set(digests)) == 6
    assert {len(d) for d in digests} == {16}


def test_text_is_refused():
    with pytest.raises(TypeError):
        md4("abc")
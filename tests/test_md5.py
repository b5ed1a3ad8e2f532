import hashlib

import pytest

from powhash.md5 import Md5, md5

STANDARD_MESSAGES = [
    b"",
    b"a",
    b"abc",
    b"message digest",
    b"abcdefghijklmnopqrstuvwxyz",
    b"1234567890" * 8,
]


@pytest.mark.parametrize(
    "message",
    STANDARD_MESSAGES + [bytes(i % 251 for i in range(n)) for n in (55, 56, 57, 63, 64, 65, 120, 1000)],
)
def test_agrees_with_hashlib(message):
    assert md5(message) == hashlib.md5(message).digest()


@pytest.mark.parametrize("split", [0, 1, 55, 64, 65, 127, 200])
def test_split_feeding(split):
    message = bytes(range(256))
    hasher = Md5(message[:split])
    hasher.update(message[split:])
    assert hasher.hexdigest() == hashlib.md5(message).hexdigest()


def test_state_survives_digest():
    hasher = Md5(b"Hello")
    hasher.digest()
    hasher.update(b" World")
    assert hasher.digest() == hashlib.md5(b"Hello World").digest()


def test_known_hello_world():
    assert Md5(b"Hello World").hexdigest() == "b10a8db164e0754105b7a99be72e3fe5"


def test_str_input_rejected():
    with pytest.raises(TypeError):
        Md5("abc")
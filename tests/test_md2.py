import pytest

from powhash.md2 import Md2, md2

RFC_1319_VECTORS = [
    (b"", "8350e5a3e24c153df2275c9f80692773"),
    (b"a", "32ec01ec4a6dac72c0ab96fb34c0b5d1"),
    (b"abc", "da853b0d3f88d99b30283a69e6ded6bb"),
    (b"message digest", "ab4f496bfb2a530b219ff33031fe06b0"),
    (b"abcdefghijklmnopqrstuvwxyz", "4e8ddff3650292ab5a4108c3aa47940b"),
]


@pytest.mark.parametrize("chunk", [1, 3, 15, 16, 17])
def test_chunked_feeding(chunk):
    message = bytes(range(50))
    hasher = Md2()
    for start in range(0, len(message), chunk):
        hasher.update(message[start:start + chunk])
    assert hasher.digest() == md2(message)


def test_repeated_digest_then_more_input():
    hasher = Md2(b"abc")
    assert hasher.digest() == hasher.digest()
    hasher.update(b"def")
    assert hasher.digest() == md2(b"abcdef")


def test_sixteen_byte_inputs_are_distinct_from_neighbours():
    assert len({md2(b"a" * n) for n in (15, 16, 17)}) == 3
    assert all(len(md2(b"x" * n)) == 16 for n in (0, 16, 33))


def test_buffer_types_and_text():
    assert md2(bytearray(b"abc")) == md2(memoryview(b"abc")) == md2(b"abc")
    with pytest.raises(TypeError):
        Md2().update("abc")
"""MD2 message digest as described in RFC 1319."""

from __future__ import annotations

from .has160 import _BlockEngine

_BLOCK_SIZE = 16
_DIGEST_SIZE = 16

# Permutation of 0..255 built from the digits of pi.
_S = bytes.fromhex(
    "292E43C9A2D87C013D3654A1ECF00613"
    "62A705F3C0C7738C98932BD9BC4C82CA"
    "1E9B573CFDD4E01667426F188A17E512"
    "BE4EC4D6DA9EDE49A0FBF58EBB2FEE7A"
    "A968799115B2073F94C210890B225F21"
    "807F5D9A5A903227353ECCE7BFF79703"
    "FF1930B348A5B5D1D75E922AAC56AAC6"
    "4FB838D296A47DB676FC6BE29C7404F1"
    "459D705964718720865BCF65E62DA802"
    "1B6025ADAEB0B9F61C466169344007EF"[:-2] + "0F"
    "5547A323DD51AF3AC35CF9CEBAC5EA26"
    "2C530D6E85288409D3DFCDF441814D52"
    "6ADC37C86CC1ABFA24E17B080CBDB14A"
    "7888958BE363E86DE9CBD5FE3B001D39"
    "F2EFB70E6658D0E4A67772F8EB754B0A"
    "314450B48FED1F1ADB998D339F118314"
)

_State = tuple[bytes, bytes]


def _compress(state: _State, block: bytes) -> _State:
    """Process one 16-byte block, returning the new state and checksum."""
    digest_state, checksum = state
    temp = bytearray(digest_state + block + bytes(s ^ b for s, b in zip(digest_state, block)))
    t = 0
    for round_index in range(18):
        for j in range(48):
            temp[j] ^= _S[t]
            t = temp[j]
        t = (t + round_index) & 0xFF

    new_checksum = bytearray(checksum)
    t = new_checksum[15]
    for i, byte in enumerate(block):
        new_checksum[i] ^= _S[byte ^ t]
        t = new_checksum[i]
    return bytes(temp[:16]), bytes(new_checksum)


def _finish(state: _State, tail: bytes, count: int) -> bytes:
    pad = _BLOCK_SIZE - len(tail)
    digest_state, checksum = _compress(state, tail + bytes([pad]) * pad)
    digest_state, _ = _compress((digest_state, checksum), checksum)
    return digest_state


class Md2:
    """Incremental MD2 hashing."""

    digest_size = _DIGEST_SIZE
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._engine = _BlockEngine(_BLOCK_SIZE, _compress, _finish, (bytes(16), bytes(16)))
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


def md2(data: bytes) -> bytes:
    """Return the MD2 digest of ``data``."""
    return Md2(data).digest()
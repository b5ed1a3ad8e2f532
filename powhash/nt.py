"""NT (NTLM) password hash: MD4 over the UTF-16LE form of the password."""

from __future__ import annotations

from .md4 import md4

_MAX_CHARS = 256


def nt_hash_unicode(password_utf16le: bytes) -> bytes:
    """Return the NT hash of a password already encoded as UTF-16LE."""
    return md4(password_utf16le)


def nt_hash(password: str | bytes) -> bytes:
    """Return the NT hash of ``password``.

    Each byte of the password (text is taken as UTF-8) is widened to a
    16-bit little-endian unit, which is exact UTF-16LE for ASCII input.
    Input ends at the first NUL byte and is limited to 256 bytes.
    """
    raw = password.encode("utf-8") if isinstance(password, str) else bytes(memoryview(password))
    raw = raw.split(b"\x00", 1)[0][:_MAX_CHARS]
    widened = b"".join(bytes((byte, 0)) for byte in raw)
    return nt_hash_unicode(widened)
"""Pure-Python message digests, proof-of-work nonce search and a hashing benchmark."""

__version__ = "0.1.0"
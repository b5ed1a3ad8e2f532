# powhash

Pure-Python implementations of a family of message digests, a proof-of-work
nonce search built on them, and a multi-threaded throughput benchmark. The
package needs nothing outside the standard library.

## Digests

Each algorithm has a one-shot function and, except for the NT hash, an
incremental class with `update`, `digest` and `hexdigest`. Calling `digest`
does not consume the state, so more data can be fed afterwards.

| Module                | One-shot                                  | Class                |
|-----------------------|-------------------------------------------|----------------------|
| `powhash.md2`         | `md2(data)`                               | `Md2`                |
| `powhash.md4`         | `md4(data)`                               | `Md4`                |
| `powhash.md5`         | `md5(data)`                               | `Md5`                |
| `powhash.nt`          | `nt_hash(password)`, `nt_hash_unicode(b)` | —                    |
| `powhash.ripemd128`   | `ripemd128(data)`                         | `Ripemd128`          |
| `powhash.ripemd160`   | `ripemd160(data)`                         | `Ripemd160`          |
| `powhash.ripemd256`   | `ripemd256(data)`                         | `Ripemd256`          |
| `powhash.has160`      | `has160(data)`                            | `Has160`             |
| `powhash.keccak`      | `keccak_224`, `keccak_384`, `keccak_512`  | `Keccak`             |
| `powhash.blake2`      | `blake2b(data, n)`, `blake2s(data, n)`    | `Blake2b`, `Blake2s` |

Notes:

- `Keccak(digest_size, data=b"")` is the original Keccak with `0x01` padding
  (not SHA-3); `digest_size` must be 28, 32, 48 or 64, otherwise
  `ValueError` is raised.
- `Blake2b(digest_size=64, key=b"")` accepts a digest size of 1 to 64 bytes
  and a key of up to 64 bytes; `Blake2s(digest_size=32, key=b"")` accepts 1
  to 32 and up to 32. Out-of-range values raise `ValueError`.
- `nt_hash(password)` takes `str` (encoded as UTF-8) or `bytes`, stops at the
  first NUL byte, keeps at most 256 bytes and widens each byte to a 16-bit
  little-endian unit before applying MD4. This is exact UTF-16LE for ASCII
  passwords. `nt_hash_unicode` takes bytes already in UTF-16LE.

```python
from powhash.md4 import md4, Md4
from powhash.blake2 import Blake2b
from powhash.nt import nt_hash

md4(b"abc").hex()

h = Md4()
h.update(b"a")
h.update(b"bc")
h.hexdigest()

Blake2b(32).hexdigest()

password = "password"
nt_hash(password).hex()
```

## Proof of work

`powhash.proofofwork` looks for the smallest nonce in `[min_nonce, max_nonce]`
whose decimal form, appended to a prefix, gives a digest that starts with at
least `difficulty` zero bits.

```python
from powhash.proofofwork import (
    HashAlgorithm, algorithm_by_name, generate_pow_single, generate_pow_multi,
)

result = generate_pow_single("challenge", HashAlgorithm.MD5, 8, 0, 100_000)
if result is not None:
    print(result.nonce, result.hexdigest)

algos = [algorithm_by_name("MD4"), algorithm_by_name("RIPEMD-160")]
multi = generate_pow_multi("challenge", algos, 4, 0, 100_000)
if multi is not None:
    print(multi.nonce, multi.hexdigests)
```

- `generate_pow_single(prefix, algorithm, difficulty, min_nonce=0, max_nonce=2**31-1)`
  returns a `PowResult` (`nonce`, `algorithm`, `digest`, `hexdigest`), or
  `None` when no nonce in the range qualifies.
- `generate_pow_multi(prefix, algorithms, difficulty, min_nonce=0, max_nonce=2**31-1)`
  requires every algorithm to pass for the same nonce and returns a
  `MultiPowResult` (`nonce`, `algorithms`, `digests`, `hexdigests`) or `None`.
  Only the first ten algorithms are used.
- The prefix may be `str` (UTF-8) or `bytes`; algorithms may be given as
  `HashAlgorithm` members or by name.
- `HashAlgorithm` values are the names used on the wire, such as `"MD5"`,
  `"SHA2-256"`, `"SHA3-512"`, `"Keccak-256"`, `"SHAKE-128"`, `"RIPEMD-160"`,
  `"BLAKE2b-256"`, `"BLAKE2s-128"`, `"HAS-160"` and `"NT"`. Each member has a
  `digest_size`. `algorithm_by_name` also accepts `"SHA256"` and `"SHA1"`,
  and raises `ValueError` for an unknown name.
- `compute_hash(algorithm, data)` returns the digest of `data`;
  `has_leading_zeros(digest, difficulty)` reports whether a digest meets a
  difficulty.

The SHA-1, SHA-2, SHA-3 and SHAKE digests come from the standard library's
`hashlib`. SHAKE-128 produces 32 bytes and SHAKE-256 produces 64 bytes.

## Benchmark

The benchmark hashes the fixed message `Hello World` from many threads and
reports hashes per second, second by second, with the average, minimum and
maximum for each algorithm:

```
powhash-benchmark
powhash-benchmark --threads 4 --duration 2 --algorithm MD5 --algorithm BLAKE2b-256
```

Options: `--threads` (default 24), `--duration` in seconds per algorithm
(default 10), and `--algorithm`, which can be repeated; without it every
algorithm is run.

From Python, `powhash.benchmark.run_benchmark(algorithms, threads, duration, stream)`
writes the same table to a stream and returns a list of `BenchmarkResult`.
`benchmark_algorithm(algorithm, threads, duration, data)` measures a single
algorithm; a `BenchmarkResult` has `per_second`, `total`, `average`,
`minimum`, `maximum` and `label`. `format_header(duration)` and
`format_row(result)` produce the table lines.

## What is not included

SHA-0, RIPEMD-320 and Whirlpool are not provided: there is no module for them
and `HashAlgorithm` has no members for them, so they cannot be used in a
proof-of-work search or benchmarked.
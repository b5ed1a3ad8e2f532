[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "powhash"
version = "0.1.0"
description = "Pure-Python message digests (MD2, MD4, MD5, NT, RIPEMD, BLAKE2, Keccak, HAS-160) with proof-of-work search and a throughput benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hash",
    "digest",
    "proof-of-work",
    "md2",
    "md4",
    "md5",
    "ripemd",
    "blake2",
    "keccak",
    "has-160",
    "ntlm",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
powhash-benchmark = "powhash.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["powhash"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zledger"
version = "0.1.0"
description = "Ledger primitives: fixed-point money, SHA3 Merkle trees, Ed25519 signatures, JubJub curve points and key-value stores"
requires-python = ">=3.10"
keywords = ["ledger", "blockchain", "merkle", "ed25519", "jubjub", "kvstore"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pynacl",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

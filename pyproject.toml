[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "onchainid"
version = "0.0.1"
description = "In-memory ERC-734/735 style identity: keys with purposes, issuer claims and Ed25519 claim verification"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome>=3.20",
]
keywords = ["identity", "erc734", "erc735", "claims", "ed25519", "keccak"]
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

[project.optional-dependencies]
test = [
    "pytest",
    "pycryptodome>=3.20",
]

[tool.hatch.build.targets.wheel]
packages = ["onchainid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "icweb3"
version = "0.1.0"
description = "Ethereum JSON-RPC building blocks: ABI tokens, transaction options, bytecode linking, Keccak hashing and secp256k1 address helpers"
requires-python = ">=3.10"
keywords = ["ethereum", "web3", "json-rpc", "abi", "keccak", "secp256k1"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["icweb3"]

[tool.pytest.ini_options]
addopts = "-ra"

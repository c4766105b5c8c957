[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gdogewallet"
version = "0.1.0"
description = "Wallet-side helpers for GoldenDoge: amount formatting, walletd RPC types, send proofs, key files, logging and sync progress"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptocurrency", "wallet", "walletd", "json-rpc", "goldendoge"]
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
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gdogewallet"]

[tool.pytest.ini_options]
addopts = "-ra"

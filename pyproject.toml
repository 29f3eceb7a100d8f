[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metaboss"
version = "0.1.0"
description = "Offline helpers for Metaplex NFT workflows: PDA derivation, batch caches, rate limiting, edition and collection checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["solana", "metaplex", "nft", "pda", "base58", "airdrop"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["metaboss"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

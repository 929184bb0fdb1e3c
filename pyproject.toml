[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edsig"
version = "0.1.0"
description = "Pure-Python Ed25519 signatures: key generation, signing and verification"
requires-python = ">=3.10"
dependencies = []
keywords = ["ed25519", "signature", "curve25519", "cryptography", "edwards"]
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
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
edsig-demo = "edsig.cli:main"
edsig-bench = "edsig.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["edsig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

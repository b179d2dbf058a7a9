[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "altbn128"
version = "0.1.0"
description = "Pure-Python arithmetic for the alt_bn128 (BN254) pairing-friendly curve: fields, G1, G2 and the optimal ate pairing"
requires-python = ">=3.10"
dependencies = []
keywords = ["bn254", "alt_bn128", "pairing", "elliptic curve", "zk-snark", "finite field"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["altbn128"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

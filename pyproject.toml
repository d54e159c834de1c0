[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "peershare"
version = "0.1.0"
description = "Peer-to-peer file sharing on a local network with UDP discovery and SHA-256 verified transfers"
requires-python = ">=3.10"
dependencies = []
keywords = ["file-sharing", "p2p", "lan", "discovery", "sha256", "transfer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: File Sharing",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
peershare = "peershare.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["peershare"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

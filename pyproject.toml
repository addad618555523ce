[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voteledger"
version = "0.1.0"
description = "A hash-linked ledger of citizen registrations and votes, with family records and a menu-driven console."
requires-python = ">=3.10"
dependencies = []
keywords = ["ledger", "blockchain", "voting", "registration", "family tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
voteledger = "voteledger.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["voteledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

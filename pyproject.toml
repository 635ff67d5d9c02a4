[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "so_long"
version = "1.0.0"
description = "Character, byte-buffer, string, linked-list and line-reading helpers for a tile-map puzzle game."
requires-python = ">=3.10"
keywords = ["strings", "bytes", "linked-list", "line-reader", "puzzle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["so_long"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

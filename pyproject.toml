[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "berlint"
version = "0.1.0"
description = "Validator for .ber tile maps: shape, walls, objects and reachability"
requires-python = ">=3.10"
dependencies = []
keywords = ["ber", "map", "validator", "tile map", "flood fill", "puzzle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
berlint = "berlint.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["berlint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

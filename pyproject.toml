[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isotiles"
version = "0.1.0"
description = "A small isometric tile-map coin-collecting game with vector, matrix and tile-map helpers"
requires-python = ">=3.10"
keywords = ["isometric", "tilemap", "game", "pygame", "vectors", "quaternions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
isotiles = "isotiles.app:main"

[tool.hatch.build.targets.wheel]
packages = ["isotiles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

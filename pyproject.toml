[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loopgrid"
version = "0.1.0"
description = "Loop and matrix exercises: number series, text patterns, matrix operations and small grid puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "loops",
    "matrix",
    "patterns",
    "pascal-triangle",
    "floyd-triangle",
    "sudoku",
    "minesweeper",
    "sparse-matrix",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
loopgrid-patterns = "loopgrid.patterns:main"

[tool.hatch.build.targets.wheel]
packages = ["loopgrid"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

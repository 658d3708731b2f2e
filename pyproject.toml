[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlebox"
version = "0.1.0"
description = "Solutions to classic algorithm puzzles over strings, sequences, arrays, grids, linked lists, trees and task scheduling."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "puzzles", "data structures", "dynamic programming", "graphs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["puzzlebox"]

[tool.pytest.ini_options]
addopts = "-ra"

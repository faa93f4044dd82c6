[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shiftword"
version = "0.1.0"
description = "Backtracking solvers for Wordle-style word search and worker shift scheduling"
requires-python = ">=3.10"
dependencies = []
keywords = ["wordle", "word-puzzle", "scheduling", "backtracking", "recursion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shiftword-wordle = "shiftword.wordle:main"
shiftword-schedwork = "shiftword.schedwork:main"

[tool.hatch.build.targets.wheel]
packages = ["shiftword"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

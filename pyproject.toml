[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic algorithms and small everyday programs: sorting, searching, graphs, puzzles, data structures and number utilities."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "searching",
    "graphs",
    "data-structures",
    "puzzles",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokit-clock = "algokit.clockface:main"
algokit-tictactoe = "algokit.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.hatch.build.targets.sdist]
include = ["algokit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

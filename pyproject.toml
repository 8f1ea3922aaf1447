[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memoarrr"
version = "0.1.0"
description = "A terminal memory-matching card game for two to four players, with a normal and an expert mode."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "memory", "cards", "board-game", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
memoarrr = "memoarrr.cli:main"
memoarrr-simulate = "memoarrr.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["memoarrr"]

[tool.pytest.ini_options]
addopts = "-ra"

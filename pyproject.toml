[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordhunt"
version = "0.1.0"
description = "Terminal word search and word guessing games with difficulty levels and scoring"
requires-python = ">=3.10"
dependencies = []
keywords = ["word search", "puzzle", "game", "terminal"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordhunt-classic = "wordhunt.classic:main"
wordhunt-guess = "wordhunt.guessing:main"
wordhunt-levels = "wordhunt.levels:main"

[tool.hatch.build.targets.wheel]
packages = ["wordhunt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

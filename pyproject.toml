[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hetapuz"
version = "1.0.0"
description = "Settings, menus and helpers of a falling-block versus puzzle game, and a checker for its scenario scripts"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "game", "versus", "scenario", "checker"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Japanese",
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
hetapuz-scenario-check = "hetapuz.scenario_filter:main"

[tool.hatch.build.targets.wheel]
packages = ["hetapuz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

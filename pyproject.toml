[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warlite"
version = "0.1.0"
description = "A small text-mode take on the WAR board game: register territories and fight dice battles."
requires-python = ">=3.10"
dependencies = []
keywords = ["war", "board game", "dice", "territories", "text game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
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
warlite = "warlite.adventurer:main"
warlite-novice = "warlite.novice:main"

[tool.hatch.build.targets.wheel]
packages = ["warlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

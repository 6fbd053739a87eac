[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tarnished"
version = "0.1.0"
description = "Game state, console input and text rendering of battle panels, navigation box, sprites and dialogue for a terminal role-playing game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rogue-like", "rpg", "terminal", "text-ui"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tarnished"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

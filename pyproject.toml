[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "viscera"
version = "0.1.0"
description = "Turn-based roguelike game core: entity world, zone generation, player actions and inventory"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "game", "ecs", "procedural-generation", "dungeon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["viscera*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubecaster"
version = "0.1.0"
description = "A small grid-based raycasting engine that renders .cub maps with XPM wall textures"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["raycasting", "raycaster", "game", "xpm", "pygame", "first-person", "maze"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubecaster = "cubecaster.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cubecaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

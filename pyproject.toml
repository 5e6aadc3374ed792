[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelplay"
version = "1.0.0"
description = "Frame-stepped arcade game logic (tanks, invaders, a space shooter, lumberjack rules) and a dialogue-script director"
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "arcade", "shooter", "space invaders", "tanks", "dialogue", "game logic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pixelplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

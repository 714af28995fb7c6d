[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickbreak"
version = "0.1.0"
description = "A small brick-breaking arcade game with a paddle, a bouncing ball and tile-based levels"
requires-python = ">=3.10"
keywords = ["game", "arcade", "breakout", "pygame", "bricks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
brickbreak = "brickbreak.app:main"

[tool.hatch.build.targets.wheel]
packages = ["brickbreak"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

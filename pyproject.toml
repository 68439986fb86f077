[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "archangel"
version = "0.1.0"
description = "A small tile-based 2D platformer engine and demo game built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "2d", "tilemap", "pygame", "engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
archangel = "archangel.main:main"

[tool.hatch.build.targets.wheel]
packages = ["archangel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcatek"
version = "0.1.0"
description = "A small arcade engine that pairs a game and a display through event subjects, with a Pacman game and a pygame display."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["arcade", "pacman", "pygame", "observer", "plugins"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arcatek = "arcatek.core:main"

[tool.hatch.build.targets.wheel]
packages = ["arcatek"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

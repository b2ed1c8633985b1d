[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boxgames"
version = "0.1.0"
description = "Two small box games: a Sokoban level and a falling-box dodge game"
requires-python = ">=3.10"
keywords = ["game", "sokoban", "puzzle", "arcade", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
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
boxgames-sokoban = "boxgames.sokoban_app:main"
boxgames-dodge = "boxgames.dodge_app:main"

[tool.hatch.build.targets.wheel]
packages = ["boxgames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

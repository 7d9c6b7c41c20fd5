[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duelchess"
version = "0.1.0"
description = "A pygame chess board for two players at one window, or in two local processes that exchange moves over POSIX signals"
requires-python = ">=3.10"
keywords = ["chess", "board game", "pygame", "signals", "two player"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
duelchess = "duelchess.app:main"

[tool.hatch.build.targets.wheel]
packages = ["duelchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

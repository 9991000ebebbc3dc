[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "pongfour"
version = "0.1.0"
description = "Four-paddle, two-team Pong with a menu, pause button and game-over screen"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pong", "game", "arcade", "pygame", "multiplayer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
pongfour = "pongfour.app:main"

[tool.setuptools.packages.find]
include = ["pongfour*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

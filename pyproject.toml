[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubetactoe"
version = "0.1.0"
description = "Three-dimensional tic-tac-toe for two players at the console"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "3d", "game", "console", "board game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubetactoe = "cubetactoe.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cubetactoe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

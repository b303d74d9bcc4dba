[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termselect"
version = "0.1.0"
description = "Pick items from a list in the terminal and print the chosen ones"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "select", "menu", "picker", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termselect = "termselect.app:main"

[tool.hatch.build.targets.wheel]
packages = ["termselect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xdgtrash"
version = "0.1.0"
description = "A command-line utility for managing the trash, following the XDG Trash specification"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["trash", "xdg", "recycle-bin", "cli", "freedesktop"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
trash = "xdgtrash.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["xdgtrash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

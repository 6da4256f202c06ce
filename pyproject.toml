[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsdialogkit"
version = "0.1.0"
description = "Filesystem helpers for file dialogs: path handling, listings, links, timestamps, byte-level text I/O and a skyline rectangle packer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "filesystem",
    "file dialog",
    "directory listing",
    "hardlinks",
    "environment variables",
    "rectangle packing",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fsdialogkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datastructs"
version = "1.0.0"
description = "Small classic data structures: a growable array, a singly linked list, an array-backed stack, a bracket balance checker and matrix combination listings."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "dynamic array", "linked list", "stack", "balanced brackets", "combinations"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
datastructs = "datastructs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["datastructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

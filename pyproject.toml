[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsgo"
version = "0.1.0"
description = "Classic data structures and algorithms: heaps, hash sets, sorts, searches and graph algorithms."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "heap",
    "sorting",
    "graph",
    "hashing",
    "bloom-filter",
    "perfect-hash",
    "max-flow",
    "shortest-path",
]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

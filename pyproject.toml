[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nutsdb"
version = "0.1.0"
description = "Building blocks of an embedded key/value store: list, set and sorted-set structures, entry encoding and a file-handle cache"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "key-value", "embedded", "skiplist", "sorted-set", "storage"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nutsdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

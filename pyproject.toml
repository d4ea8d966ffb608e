[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "framer"
version = "0.1.0"
description = "Classic algorithm exercises: LRU cache, maximum subarray, two-sum, bracket validation and string puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "lru", "cache", "kadane", "two-sum", "interview"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["framer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

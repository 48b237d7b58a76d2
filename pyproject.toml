[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "waterdrop"
version = "1.3.6"
description = "Small utilities for services: buffer pools, an LRU cache, rolling windows, a keyword trie, list helpers, jitter, calendar helpers and IP discovery."
requires-python = ">=3.10"
keywords = ["utilities", "lru", "trie", "buffer-pool", "jitter", "rolling-window", "datetime"]
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
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["waterdrop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

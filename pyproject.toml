[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sliceops"
version = "0.1.0"
description = "Small functional helpers for lists: slicing, filtering, sorting, set-like operations, statistics, composition, currying, JSON encoding and chaining."
requires-python = ">=3.10"
dependencies = []
keywords = ["list", "functional", "utilities", "compose", "curry", "statistics", "chaining"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sliceops"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

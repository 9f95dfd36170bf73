[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "funclasses"
version = "0.1.0"
description = "Functional type classes for Python: semigroups, monoids, functors, semigroupals and natural transformations"
requires-python = ">=3.10"
dependencies = []
keywords = ["functional", "functor", "monoid", "semigroup", "semigroupal", "type classes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["funclasses"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

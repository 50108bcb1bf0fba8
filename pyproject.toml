[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "variantkit"
version = "0.1.0"
description = "Declarative enums with data-carrying variants: case styles, string conversion, parsing, iteration, discriminants, messages and per-variant tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["enum", "variant", "serialization", "parsing", "discriminant", "case-style"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
packages = ["variantkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

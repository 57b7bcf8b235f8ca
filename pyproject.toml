[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algebelt"
version = "0.1.0"
description = "Semigroups, monoids, validated accumulation, generic record conversion and field paths for Python."
requires-python = ">=3.10"
dependencies = []
keywords = ["semigroup", "monoid", "validated", "generic", "functional", "laws"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["algebelt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

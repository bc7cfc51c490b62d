[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lamina"
version = "1.0.0"
description = "Exact arithmetic toolkit: big integers, rationals, simplifiable symbolic expressions and an interactive line editor"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bigint",
    "rational",
    "fractions",
    "symbolic",
    "computer-algebra",
    "exact-arithmetic",
    "line-editor",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lamina"]

[tool.hatch.build.targets.sdist]
include = ["lamina", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

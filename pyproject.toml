[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arraydrills"
version = "0.1.0"
description = "Classic array, matrix and sorting exercises, each in brute-force, better and optimal forms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "arrays",
    "sorting",
    "kadane",
    "two-sum",
    "matrix",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
arraydrills = "arraydrills.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arraydrills"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
check_untyped_defs = true

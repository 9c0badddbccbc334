[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stakeledger"
version = "0.1.0"
description = "Row types, coin encoding and an HTTP actions worker for indexing proof-of-stake chain data into a relational database"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = [
    "blockchain",
    "staking",
    "validators",
    "indexer",
    "database",
    "postgresql",
    "actions",
]
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
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["stakeledger"]

[tool.hatch.build.targets.sdist]
include = [
    "stakeledger",
    "tests",
]

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

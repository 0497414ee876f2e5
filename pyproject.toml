[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ydbops"
version = "0.1.0"
description = "Building blocks for YDB cluster maintenance: node targeting, version filters, profiles, maintenance task helpers and help output"
requires-python = ">=3.10"
keywords = ["ydb", "maintenance", "cms", "cluster", "rolling-restart", "operations"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]
dependencies = [
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["ydbops"]

[tool.hatch.build.targets.sdist]
include = ["ydbops", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

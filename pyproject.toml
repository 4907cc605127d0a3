[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tomanbook"
version = "0.1.0"
description = "A small personal ledger of incomes and costs in tomans, dated by the Persian (Jalali) calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["ledger", "budget", "toman", "jalali", "persian", "accounting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Persian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tomanbook = "tomanbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tomanbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

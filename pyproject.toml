[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "budgetbuddy"
version = "0.1.0"
description = "Personal budget tracker: record income and expenses, set monthly goals and review spending by category."
requires-python = ">=3.10"
dependencies = []
keywords = ["budget", "finance", "expenses", "income", "sqlite", "ledger"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
budgetbuddy = "budgetbuddy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["budgetbuddy"]

[tool.pytest.ini_options]
addopts = "-ra"

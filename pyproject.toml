[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "demoapps"
version = "0.1.0"
description = "Small application models: calculators, a clock formatter, a store API client, a file explorer, a Hacker News reader, a dog picture store and UI state helpers"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["calculator", "clock", "file-explorer", "hackernews", "shop", "sqlite", "ui-state"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
demoapps-calc = "demoapps.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["demoapps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

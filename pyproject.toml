[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fleetdb"
version = "0.1.0"
description = "Interactive fleet machinery database with login, statistics and a plain-text store"
requires-python = ">=3.10"
dependencies = []
keywords = ["fleet", "machinery", "inventory", "database", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fleetdb = "fleetdb.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fleetdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

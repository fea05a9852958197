[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carledger"
version = "0.1.0"
description = "Keep a small register of vehicles in a semicolon-separated text file, with validation of dates and number plates."
requires-python = ">=3.10"
dependencies = []
keywords = ["vehicles", "register", "parser", "validation", "table"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
carledger = "carledger.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["carledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

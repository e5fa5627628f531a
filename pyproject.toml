[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algobasics"
version = "0.1.0"
description = "Elementary sorts, binary-search routines and a randomised cross-check of the sorts"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "sorting", "binary search", "bubble sort", "insertion sort", "selection sort", "peak finding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algobasics-sort = "algobasics.sorting:main"
algobasics-search = "algobasics.search:main"
algobasics-validate = "algobasics.validator:main"

[tool.hatch.build.targets.wheel]
packages = ["algobasics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

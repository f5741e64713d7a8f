[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "path-finder"
version = "0.1.0"
description = "Load locations and distances from comma-separated files into a bidirectional graph."
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "locations", "distances", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
path-finder = "path_finder.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["path_finder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

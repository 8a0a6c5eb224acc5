[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eonetmap"
version = "0.1.0"
description = "Fetch, store and turn into map markers the natural events published by the EONET API"
requires-python = ">=3.10"
keywords = ["eonet", "natural events", "gis", "map", "wildfires", "volcanoes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
eonetmap = "eonetmap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["eonetmap"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

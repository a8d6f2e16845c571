[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hg4dslicer"
version = "0.1.0"
description = "Mesh model, mesh statistics and geometry helpers for valve-grid deposition slicing"
requires-python = ">=3.10"
dependencies = []
keywords = ["slicer", "3d-printing", "mesh", "geometry", "valve-grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hg4dslicer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "palletload"
version = "0.1.0"
description = "Select pallets for a delivery truck to maximise profit within its weight capacity (0/1 knapsack)"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "scipy",
]
keywords = ["knapsack", "optimization", "dynamic-programming", "integer-programming", "backtracking", "logistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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
palletload = "palletload.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["palletload"]

[tool.pytest.ini_options]
addopts = "-ra"

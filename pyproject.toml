[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "amrsim"
version = "0.1.0"
description = "Parameter tables for an individual-based simulation of bacterial infection, antibiotic use and antimicrobial resistance"
requires-python = ">=3.10"
dependencies = []
keywords = ["antimicrobial resistance", "epidemiology", "simulation", "antibiotics", "parameters"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["amrsim*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

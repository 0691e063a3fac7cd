[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "matrixlab"
version = "0.1.0"
description = "Square integer matrices: addition, multiplication, diagonal sums and row and column swaps"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "linear-algebra", "integer", "square-matrix"]
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
matrixlab = "matrixlab.cli:main"

[tool.setuptools.packages.find]
include = ["matrixlab*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

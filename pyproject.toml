[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rankstencil"
version = "0.1.0"
description = "PageRank over web graphs, Gauss-Seidel stencil sweeps on 3D grids and small numerical exercises"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pagerank",
    "web graph",
    "sparse matrix",
    "csr",
    "gauss-seidel",
    "stencil",
    "heat equation",
    "numerical methods",
]
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
rankstencil = "rankstencil.cli:main"
rankstencil-gs = "rankstencil.gs_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rankstencil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

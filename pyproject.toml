[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pcgprecond"
version = "0.1.0"
description = "Preconditioned conjugate gradient solver with diagonal incomplete Cholesky and ILU(k) preconditioners for sparse matrices"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "conjugate gradient",
    "preconditioner",
    "incomplete LU",
    "ILU(k)",
    "incomplete Cholesky",
    "sparse matrix",
    "linear solver",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pcgprecond"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

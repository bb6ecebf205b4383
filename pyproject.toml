[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "runst"
version = "0.1.0"
description = "A small, dependency-free feed-forward neural network and gradient-descent toolkit."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "neural-network",
    "forward-propagation",
    "gradient-descent",
    "activation-functions",
    "weight-initialization",
    "regression",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
runst = "runst.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["runst"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

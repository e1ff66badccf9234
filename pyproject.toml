[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "devsim"
version = "0.13.1"
description = "Discrete event simulation following the Discrete Event System Specification, with output analysis tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "discrete", "event", "stochastic", "modeling", "devs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["devsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mpa"
version = "0.1.0"
description = "Floating-point rounding modes, numeric constants, error types and ARM architecture detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["rounding", "floating-point", "math", "precision", "arm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["mpa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

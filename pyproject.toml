[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geotemp"
version = "0.1.0"
description = "Temperature statistics computed with the E9M22 floating-point format (1 sign, 9 exponent, 22 mantissa bits)"
requires-python = ">=3.10"
dependencies = []
keywords = ["floating-point", "e9m22", "soft-float", "temperature", "celsius", "fahrenheit"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
geotemp = "geotemp.report:main"

[tool.hatch.build.targets.wheel]
packages = ["geotemp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

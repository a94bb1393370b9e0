[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tpukit"
version = "0.1.0"
description = "Memory map, byte and word values, and front-end pieces of the T language compiler for a 16-bit toy processor"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "preprocessor", "type-system", "16-bit", "toy-cpu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tpukit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

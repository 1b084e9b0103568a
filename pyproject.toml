[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kmapsimplify"
version = "0.1.0"
description = "Simplify two- to four-input Boolean functions with Karnaugh maps"
requires-python = ">=3.10"
dependencies = []
keywords = ["karnaugh", "k-map", "boolean", "logic", "simplification", "minterm"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kmapsimplify = "kmapsimplify.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kmapsimplify"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

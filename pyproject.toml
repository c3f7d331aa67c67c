[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logicreduce"
version = "0.1.0"
description = "Parse propositional logic expressions and reduce them with the laws of boolean algebra"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "propositional", "boolean", "simplification", "expression tree"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logicreduce = "logicreduce.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["logicreduce"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

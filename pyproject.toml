[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wautomata"
version = "0.1.0"
description = "Weighted automata, push-down storage, coarse-to-fine recognition and PMCFG derivation tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["automata", "weighted automata", "pmcfg", "grammar", "parsing", "negra", "recognition"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wautomata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

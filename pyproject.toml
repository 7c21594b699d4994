[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "automatakit"
version = "0.1.0"
description = "Finite automata, pushdown automata, context-free grammars and regular expressions for checking whether words are accepted"
requires-python = ">=3.10"
dependencies = []
keywords = ["automata", "dfa", "nfa", "pda", "grammar", "formal-languages"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
automatakit-dfa = "automatakit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["automatakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

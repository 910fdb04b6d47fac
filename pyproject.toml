[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskset"
version = "0.1.0"
description = "Prefix search bar, triangle collision detection with an interactive viewer, and generic repeated-operation power"
requires-python = ">=3.10"
keywords = ["trie", "autocomplete", "prefix-search", "collision", "separating-axis", "exponentiation"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taskset-search = "taskset.application:main"
taskset-triangles = "taskset.visualizer:main"
taskset-power = "taskset.power:main"

[tool.hatch.build.targets.wheel]
packages = ["taskset"]

[tool.pytest.ini_options]
addopts = "-ra"

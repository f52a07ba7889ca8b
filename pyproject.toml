[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arboleda"
version = "3.0.0"
description = "Interactive binary tree, stack and AVL-balanced word dictionary for learning data structures"
requires-python = ">=3.10"
keywords = ["binary tree", "bst", "avl", "stack", "dictionary", "data structures", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arboleda-tree = "arboleda.binary_tree:main"
arboleda-stack = "arboleda.stack:main"
arboleda-dictionary = "arboleda.dictionary_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arboleda"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

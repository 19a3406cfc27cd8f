[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordtrees"
version = "0.1.0"
description = "Balanced search trees, hash tables and word-frequency dictionaries, with an interactive integer-set shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "red-black tree", "hash table", "word count", "dictionary", "set"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordtrees-count = "wordtrees.wordcount:main"
wordtrees-sets = "wordtrees.setshell:main"

[tool.hatch.build.targets.wheel]
packages = ["wordtrees"]

[tool.pytest.ini_options]
addopts = "-ra"

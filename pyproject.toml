[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labstructs"
version = "0.1.0"
description = "Classic data structures with plain-text persistence, plus small exercises built on them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "linked list",
    "stack",
    "queue",
    "hash table",
    "hash set",
    "avl tree",
    "binary search tree",
    "shell sort",
    "reverse polish notation",
    "roman numerals",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labstructs-shell = "labstructs.shell:main"
labstructs-bst = "labstructs.bst:main"
labstructs-set = "labstructs.value_set:main"
labstructs-roman = "labstructs.roman:main"
labstructs-rpn = "labstructs.rpn:main"
labstructs-subarray = "labstructs.subarrays:subarray_main"
labstructs-similar = "labstructs.subarrays:similar_main"

[tool.hatch.build.targets.wheel]
packages = ["labstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

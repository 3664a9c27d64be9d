[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lineards"
version = "0.1.0"
description = "Linear data structures: a fixed-capacity array, a growable array, a singly linked list and a bounded stack"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "array", "linked list", "stack", "education"]
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lineards-demo = "lineards.tester:main"

[tool.hatch.build.targets.wheel]
packages = ["lineards"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

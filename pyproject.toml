[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graaf"
version = "0.1.0"
description = "Graph algorithms over a small graph protocol: traversal, vertex degrees, cycle detection, shortest paths, strongly connected components and DOT export."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "algorithms",
    "traversal",
    "dijkstra",
    "a-star",
    "tarjan",
    "kosaraju",
    "dot",
    "graphviz",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["graaf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

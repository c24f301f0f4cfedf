[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "progstruct"
version = "0.1.0"
description = "Program-structure utilities: dominator trees, SSA construction, scoped environments and curve constants"
requires-python = ">=3.10"
dependencies = []
keywords = ["ssa", "dominator-tree", "control-flow-graph", "static-analysis", "compiler"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Quality Assurance",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["progstruct"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

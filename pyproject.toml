[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xclkit"
version = "2.2.2"
description = "Containers, 128-bit integers, a red-black tree, thread handles, clocks and atomic cells"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "containers",
    "red-black tree",
    "vector",
    "int128",
    "atomic",
    "threads",
    "exit handlers",
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xclkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

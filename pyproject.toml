[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boundedkit"
version = "0.1.0"
description = "Fixed-capacity containers, a linear arena allocator and a self-balancing AVL tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "bounded", "allocator", "arena", "avl", "stack", "queue"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["boundedkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

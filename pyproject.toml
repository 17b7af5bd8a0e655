[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "irlab"
version = "0.1.0"
description = "Arithmetic expression compiler to tree dumps, stack-machine code and LLVM-style IR text, with ELF format definitions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "expression",
    "parser",
    "llvm",
    "ir",
    "stack-machine",
    "elf",
]
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
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
irlab-expr = "irlab.exprcli:main"

[tool.hatch.build.targets.wheel]
packages = ["irlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

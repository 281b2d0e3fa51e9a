[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zlisp"
version = "0.1.0"
description = "Lexer and supporting data structures for a small Lisp dialect"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "lexer", "tokenizer", "interpreter"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zlisp = "zlisp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zlisp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

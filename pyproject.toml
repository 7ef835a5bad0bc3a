[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicomp"
version = "0.1.0"
description = "Small compiler-construction toolkit: text filters, a lexer, recursive-descent recognizers and parsers, and simple code generators"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "lexer",
    "parser",
    "recursive-descent",
    "three-address-code",
    "code-generation",
    "symbol-table",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minicomp-textfiles = "minicomp.textfiles:main"
minicomp-keywords = "minicomp.keywords:main"
minicomp-lexer = "minicomp.lexer:main"
minicomp-grammars = "minicomp.grammars:main"
minicomp-codegen = "minicomp.codegen:main"
minicomp-tokenparser = "minicomp.tokenparser:main"
minicomp-rdbase = "minicomp.rdbase:main"
minicomp-rdparser = "minicomp.rdparser:main"

[tool.hatch.build.targets.wheel]
packages = ["minicomp"]

[tool.hatch.build.targets.sdist]
include = ["minicomp", "tests"]

[tool.pytest.ini_options]
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
check_untyped_defs = true

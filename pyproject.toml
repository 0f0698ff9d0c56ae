[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xvtools"
version = "0.1.0"
description = "Small Unix-style user tools (grep, wc, cat, echo, ls, find, mkdir, rm, ln, primes) plus a shell parser, a free-list allocator and binary layout helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "unix",
    "coreutils",
    "grep",
    "shell",
    "parser",
    "elf",
    "virtio",
    "allocator",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Utilities",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xv-grep = "xvtools.grep:main"
xv-wc = "xvtools.wc:main"
xv-cat = "xvtools.cat:main"
xv-echo = "xvtools.echo:main"
xv-ls = "xvtools.fsutils:main_ls"
xv-find = "xvtools.fsutils:main_find"
xv-mkdir = "xvtools.fsutils:main_mkdir"
xv-rm = "xvtools.fsutils:main_rm"
xv-ln = "xvtools.fsutils:main_ln"
xv-primes = "xvtools.primes:main"

[tool.hatch.build.targets.wheel]
packages = ["xvtools"]

[tool.hatch.build.targets.sdist]
include = ["xvtools", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

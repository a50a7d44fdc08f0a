[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dspellutils"
version = "0.1.0"
description = "Text utilities for spell checking: tokenizing, case handling, UTF-8 helpers, index mapping, URL helpers and INI settings."
requires-python = ">=3.10"
dependencies = []
keywords = ["spell checking", "tokenizer", "utf-8", "ini", "settings"]
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
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dspellutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adocwarnings"
version = "0.1.0"
description = "Warning types and match-with-warnings results for an AsciiDoc parser"
requires-python = ">=3.10"
keywords = ["asciidoc", "parser", "warnings", "markup"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["adocwarnings"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cracknclash"
version = "0.1.0"
description = "A terminal code-breaking race against a computer opponent that narrows down the secret code by elimination."
requires-python = ">=3.10"
keywords = ["game", "mastermind", "code-breaking", "puzzle", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cracknclash = "cracknclash.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cracknclash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

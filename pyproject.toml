[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "huffpack"
version = "0.1.0"
description = "Huffman coding of text files, in one pass or over threaded chunks"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "compression", "entropy-coding", "prefix-code", "threading"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
huffpack = "huffpack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["huffpack"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pinyintable"
version = "0.1.0"
description = "Table-code input editor, SQLite phrase table, punctuation and English emoji tables for Chinese input methods"
requires-python = ">=3.10"
dependencies = []
keywords = ["pinyin", "input method", "chinese", "emoji", "table", "punctuation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pinyintable"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

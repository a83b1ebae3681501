[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchserver"
version = "0.1.0"
description = "A small in-memory TF-IDF document search server with stop words, minus words and a request log."
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "tf-idf", "indexing", "inverted-index", "text"]
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
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchserver = "searchserver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["searchserver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

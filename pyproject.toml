[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "problemset1200"
version = "0.1.0"
description = "Solutions to thirty algorithmic problems of moderate difficulty, as functions and a command."
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "problem-solving", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
problemset1200 = "problemset1200.cli:main"

[tool.setuptools.packages.find]
include = ["problemset1200*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

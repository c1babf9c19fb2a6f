[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "remoteid"
version = "0.1.0"
description = "Encode, decode and validate ASTM F3411 drone Remote ID broadcast messages"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "remote id",
    "drone",
    "uas",
    "astm f3411",
    "broadcast",
    "bluetooth",
    "wifi nan",
]
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
    "Topic :: Communications :: Ham Radio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["remoteid"]

[tool.hatch.build.targets.sdist]
include = ["remoteid", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "charprobe"
version = "0.1.0"
description = "Building blocks for statistical character-set probing of byte streams"
requires-python = ">=3.10"
dependencies = []
keywords = ["charset", "encoding", "detection", "prober", "state machine", "unicode", "cjk", "hebrew"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["charprobe"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "riakpbc"
version = "0.1.0"
description = "Message encoding and decoding for the Riak protocol buffers interface: bucket properties, server information and wire primitives"
requires-python = ">=3.10"
dependencies = []
keywords = ["riak", "protocol-buffers", "database", "bucket-properties", "key-value"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["riakpbc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

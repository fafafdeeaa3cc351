[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "potency"
version = "0.1.0"
description = "Memoize sync and async function results in a durable key-value store."
requires-python = ">=3.10"
dependencies = []
keywords = ["memoization", "cache", "durability", "asyncio", "sqlite", "idempotency"]
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
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["potency"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sapadt"
version = "0.1.0"
description = "Asynchronous client for the ABAP Development Tools (ADT) REST services of SAP systems"
requires-python = ">=3.10"
keywords = ["sap", "abap", "adt", "rest", "client", "async"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
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
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["sapadt"]

[tool.pytest.ini_options]
addopts = "-ra"

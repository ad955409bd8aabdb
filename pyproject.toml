[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nosqlqtf"
version = "0.1.0"
description = "Query test framework helpers for a NoSQL database: suite configuration, test data, prepared statements and put request settings"
requires-python = ">=3.10"
keywords = ["nosql", "query", "testing", "test-framework", "qtf"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
    "Topic :: Database",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nosqlqtf"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primer"
version = "0.1.0"
description = "Small building blocks: a calculator, a bookstore catalogue, a credit card value and a few custom types."
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "bookstore", "catalog", "arithmetic", "examples"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
primer-calculator = "primer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["primer"]

[tool.pytest.ini_options]
addopts = "-ra"

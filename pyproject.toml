[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bancoleilao"
version = "0.1.0"
description = "Small domain models for a bank (accounts, holders, employees) and an auction with a bid evaluator"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "account", "auction", "bids", "object-oriented", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
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
bancoleilao-banco = "bancoleilao.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bancoleilao"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

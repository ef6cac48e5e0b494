[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poise"
version = "0.1.0"
description = "Argument parsing, command lookup and cooldown tracking for chat bot commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "bot", "commands", "parsing", "cooldown", "code-block"]
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
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["poise"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "actionbind"
version = "0.16.0"
description = "Map abstract game actions to button and axis inputs, with configurable handling of clashing key chords."
requires-python = ">=3.10"
dependencies = []
keywords = ["input", "keybindings", "actions", "games", "chords"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["actionbind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

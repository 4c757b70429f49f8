[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "microkeys"
version = "0.1.0"
description = "Key event naming, key-binding trees and command-bar completion for a terminal text editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "keybindings", "keytree", "completion", "terminal"]
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
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["microkeys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

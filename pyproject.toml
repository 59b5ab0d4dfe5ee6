[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textareas"
version = "0.1.0"
description = "Labelled rectangular text areas with colours, plus helpers for checking printed output"
requires-python = ">=3.10"
dependencies = []
keywords = ["widgets", "text area", "rectangle", "colour", "output capture"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["textareas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

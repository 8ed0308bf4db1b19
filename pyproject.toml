[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "binwrapper"
version = "0.1.0"
description = "Pick the platform-specific download of a command line tool and unpack its archive"
requires-python = ">=3.10"
keywords = ["binary", "executable", "platform", "archive", "zip", "tar", "extract"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Archiving",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["binwrapper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

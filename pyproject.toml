[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "winix"
version = "0.1.0"
description = "Unix-style commands (cat, grep, head, chmod, chown, kill, df, free, git) and text tools as a Python library"
requires-python = ">=3.10"
keywords = ["shell", "unix", "commands", "cli", "coreutils", "kill", "chmod", "ansi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
    "termcolor",
    "prompt-toolkit",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
disown = "winix.disown:main"

[tool.hatch.build.targets.wheel]
packages = ["winix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

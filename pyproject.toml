[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "argusui"
version = "0.1.0"
description = "Terminal UI building blocks for watching coding agents in git worktrees: diff parsing, panel layout, key handling, git status panels"
requires-python = ">=3.10"
keywords = ["terminal", "tui", "diff", "git", "ansi", "layout", "keybindings"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Version Control :: Git",
]
dependencies = [
    "pygments",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["argusui"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

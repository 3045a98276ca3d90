[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aetherfiles"
version = "0.1.0"
description = "File-manager logic: sorting and filtering of entries, navigation history, bookmarks, undo, context menus, themes and app uninstall planning"
requires-python = ">=3.10"
keywords = ["file-manager", "bookmarks", "navigation", "undo", "theme", "trash"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aetherfiles"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

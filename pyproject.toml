[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "handmenu"
version = "0.1.0"
description = "Launcher menu logic for handheld devices: file browsing, input mapping, hotkeys, layout, text wrapping and an on-screen keyboard"
requires-python = ">=3.10"
dependencies = []
keywords = ["launcher", "menu", "handheld", "file-browser", "input-mapping", "on-screen-keyboard"]
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
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["handmenu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

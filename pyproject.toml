[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blocktris"
version = "0.1.0"
description = "A small falling-block puzzle game on a 10x20 grid, played with the arrow keys."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "falling blocks", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest", "pygame"]

[project.scripts]
blocktris = "blocktris.game:main"

[tool.hatch.build.targets.wheel]
packages = ["blocktris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "guirender"
version = "0.1.0"
description = "Rendering helpers for an editor GUI: easing and spring animation, cursor blinking and effects, guifont parsing and crash reports."
requires-python = ">=3.10"
keywords = ["editor", "gui", "cursor", "animation", "guifont", "easing"]
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["guirender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

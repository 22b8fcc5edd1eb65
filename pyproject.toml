[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridmvc"
version = "0.1.0"
description = "A small model-view-controller framework for grid games drawn in an ANSI terminal"
requires-python = ">=3.10"
keywords = ["terminal", "ansi", "game", "mvc", "grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridmvc = "gridmvc.main:main"

[tool.hatch.build.targets.wheel]
packages = ["gridmvc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "musicstats"
version = "0.1.0"
description = "In-memory catalogue of artists, albums, musics, users and listening history, with listening statistics and a query-output checker"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "statistics", "listening history", "catalogue"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
musicstats-check = "musicstats.checker:main"

[tool.hatch.build.targets.wheel]
packages = ["musicstats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

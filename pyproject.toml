[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recursia"
version = "1.0.0"
description = "Integer 2D geometry, a chi-squared distribution check, layout helpers and a console demo menu"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "geometry",
    "vector",
    "chi-squared",
    "aspect-ratio",
    "mollweide",
    "console-menu",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["recursia"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

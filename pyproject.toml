[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flixcore"
version = "0.1.0"
description = "Movie catalogue core: movie metadata, CSV-backed synopses, sorting, selection and cover image generation"
requires-python = ">=3.10"
keywords = ["movies", "catalogue", "csv", "covers", "media"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["flixcore"]

[tool.pytest.ini_options]
addopts = "-ra"

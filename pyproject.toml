[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "booruposter"
version = "0.1.0"
description = "A bot that posts random images from a Gelbooru-compatible board to a Misskey account"
requires-python = ">=3.11"
keywords = ["misskey", "gelbooru", "booru", "bot", "fediverse"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
booruposter = "booruposter.bot:main"

[tool.hatch.build.targets.wheel]
packages = ["booruposter"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

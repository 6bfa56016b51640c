[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blackjack"
version = "0.1.0"
description = "A game of blackjack played at the terminal or over a small HTTP API."
requires-python = ">=3.10"
keywords = ["blackjack", "cards", "game", "casino", "http"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blackjack = "blackjack.game:main"
blackjack-server = "blackjack.server:main"

[tool.hatch.build.targets.wheel]
packages = ["blackjack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

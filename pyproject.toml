[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickbreaker"
version = "1.0.0"
description = "A small brick breaker arcade game built on pygame"
requires-python = ">=3.10"
keywords = ["game", "arcade", "breakout", "brick breaker", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
brickbreaker = "brickbreaker.game:main"

[tool.hatch.build.targets.wheel]
packages = ["brickbreaker"]

[tool.pytest.ini_options]
addopts = "-ra"

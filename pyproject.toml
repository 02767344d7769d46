[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "viper"
version = "0.1.0"
description = "A small 2D game engine with a top-down space shooter built on it"
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "arcade", "shooter", "particles", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
viper = "viper.main:main"

[tool.hatch.build.targets.wheel]
packages = ["viper"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catroad"
version = "0.1.0"
description = "Cat Road: a small pygame arcade game where a kitten roams the window picking up collectibles"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pygame", "cat"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
catroad = "catroad.juego:main"
catroad-sprite-demo = "catroad.personaje:main"

[tool.hatch.build.targets.wheel]
packages = ["catroad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frutaquecaiu"
version = "1.0.0"
description = "Fruta que Caiu: a terminal arcade game where you catch falling fruit in a basket"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "arcade", "ansi", "fruit"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
frutaquecaiu = "frutaquecaiu.game:main"
frutaquecaiu-demo = "frutaquecaiu.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["frutaquecaiu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

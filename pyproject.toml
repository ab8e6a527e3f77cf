[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tomatoarena"
version = "0.1.0"
description = "A small top-down multiplayer arena game where players throw tomatoes at each other, with a relay server."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "multiplayer", "pygame", "tcp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tomatoarena = "tomatoarena.game:main"
tomatoarena-server = "tomatoarena.server:main"

[tool.hatch.build.targets.wheel]
packages = ["tomatoarena"]

[tool.pytest.ini_options]
addopts = "-ra"

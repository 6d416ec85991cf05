[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pigsgame"
version = "0.1.0"
description = "Game logic for a small side-scrolling platformer: characters, animations, scene scripts and collisions"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "pygame", "side-scroller", "2d", "collision", "animation"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pigsgame"]

[tool.pytest.ini_options]
addopts = "-ra"

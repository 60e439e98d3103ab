[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "halloween_ninja"
version = "0.1.0"
description = "Game logic for a side-scrolling Halloween ninja platformer: checks, seeded randomness, sine sliders, screen layout, sound effect management, game states and a bar graph layout."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "state-machine", "animation", "sliders"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["halloween_ninja"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jeeprun"
version = "0.1.0"
description = "A top-down arcade game: drive a jeep, guard the weaklings walking to the boat, fight off zombies and turrets."
requires-python = ">=3.10"
keywords = ["game", "arcade", "top-down", "shooter", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
jeeprun = "jeeprun.app:main"

[tool.hatch.build.targets.wheel]
packages = ["jeeprun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

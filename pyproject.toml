[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inclinedroll"
version = "0.1.0"
description = "Solid and hollow spheres rolling down an inclined plane, with a CSV log and a live pygame view"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["physics", "simulation", "inclined plane", "rolling", "moment of inertia", "midpoint method"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
inclinedroll = "inclinedroll.app:main"

[tool.hatch.build.targets.wheel]
packages = ["inclinedroll"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

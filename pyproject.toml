[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lunarlander"
version = "0.1.0"
description = "Lunar lander simulation core: terrain octree, ray and box collision, particle emitters and game state"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["lunar lander", "octree", "collision", "ray casting", "particles", "simulation", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lunarlander"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

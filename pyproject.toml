[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "immolate"
version = "0.1.0"
description = "Deterministic seed simulation of shops, packs, vouchers and decks for a poker roguelike"
requires-python = ">=3.10"
dependencies = []
keywords = ["seed", "simulation", "rng", "roguelike", "cards"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
immolate = "immolate.shop:main"

[tool.hatch.build.targets.wheel]
packages = ["immolate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

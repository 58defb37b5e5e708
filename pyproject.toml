[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "livingocean"
version = "0.1.0"
description = "A grid-based ocean ecosystem simulation of algae, herbivore fish and predator fish"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "ecosystem", "artificial-life", "predator-prey", "grid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
livingocean = "livingocean.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["livingocean"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "abrprint"
version = "0.1.0"
description = "Draw bar graphs from Abricate summary tables"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["abricate", "bioinformatics", "bar graph", "antimicrobial resistance", "plotting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
abrprint = "abrprint.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["abrprint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "colourtrack"
version = "0.1.0"
description = "Track blue, red and yellow markers through video frames and record their average positions and spread."
requires-python = ">=3.10"
keywords = ["video", "colour", "tracking", "image-processing", "markers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "imageio",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
colourtrack = "colourtrack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["colourtrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

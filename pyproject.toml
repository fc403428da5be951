[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmptool"
version = "0.1.0"
description = "Load, edit and save 8-bit and 24-bit BMP images with simple filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "bitmap", "image", "filter", "convolution", "grayscale"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bmptool = "bmptool.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bmptool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

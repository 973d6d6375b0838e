[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wireframe3d"
version = "0.1.0"
description = "Load, transform, draw and save 3D wireframe models"
requires-python = ">=3.10"
dependencies = []
keywords = ["wireframe", "3d", "geometry", "transformation", "viewer", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wireframe3d = "wireframe3d.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["wireframe3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

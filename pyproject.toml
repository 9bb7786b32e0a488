[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spheretrace"
version = "0.0.1"
description = "A small sphere ray tracer that renders a scene to an uncompressed TGA image"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "graphics", "tga", "sphere"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spheretrace = "spheretrace.render:main"

[tool.hatch.build.targets.wheel]
packages = ["spheretrace"]

[tool.pytest.ini_options]
addopts = "-ra"

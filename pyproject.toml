[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "waverend"
version = "0.1.0"
description = "A small software rasterizer that renders Wavefront OBJ models with flat shading."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["obj", "wavefront", "rasterizer", "renderer", "3d", "flat-shading"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
waverend = "waverend.app:main"

[tool.hatch.build.targets.wheel]
packages = ["waverend"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

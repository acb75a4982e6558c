[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixed8"
version = "0.1.0"
description = "Signed fixed-point numbers with 8 fractional bits, plus a point-in-triangle test built on them"
requires-python = ">=3.10"
dependencies = []
keywords = ["fixed-point", "arithmetic", "barycentric", "geometry", "triangle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fixed8-demo = "fixed8.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["fixed8"]

[tool.pytest.ini_options]
addopts = "-ra"

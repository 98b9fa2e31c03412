[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sketchkit"
version = "0.1.0"
description = "Perlin and simplex noise, alpha fades, corner warping, optical-flow point tools and a small 2D Verlet physics engine for creative coding."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "perlin",
    "simplex",
    "noise",
    "fade",
    "optical-flow",
    "physics",
    "verlet",
    "particles",
    "creative-coding",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sketchkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

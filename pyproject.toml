[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duckdemo"
version = "0.1.0"
description = "A small arcade demo: a walking duck with a splash screen, menus, volume settings and a wireframe 3D scene"
requires-python = ">=3.10"
keywords = ["game", "demo", "pygame", "arcade", "sprite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
duckdemo = "duckdemo.app:main"

[tool.hatch.build.targets.wheel]
packages = ["duckdemo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

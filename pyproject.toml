[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saltengine"
version = "0.1.0"
description = "A small 2D game engine with an entity-component-system core, batched sprite drawing and bitmap fonts, on pygame"
requires-python = ">=3.10"
keywords = ["game", "engine", "ecs", "entity-component-system", "sprites", "pygame", "bitmap-font"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
saltengine-sandbox = "saltengine.sandbox:main"

[tool.hatch.build.targets.wheel]
packages = ["saltengine"]

[tool.pytest.ini_options]
addopts = "-ra"

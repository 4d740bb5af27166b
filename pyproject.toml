[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coinfall"
version = "0.1.0"
description = "A small falling-coins arcade game modelled in plain Python: sprites, box colliders, a PWM tone generator and a touch panel"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "sprite", "collision", "touchscreen", "rgb565", "crc32"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["coinfall"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

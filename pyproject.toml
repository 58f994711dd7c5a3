[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "delaycontrol"
version = "0.1.0"
description = "Building blocks for the user interface of a tape-delay audio module: input smoothing, calibration, tempo detection, action queueing and display state."
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "delay", "control", "tap-tempo", "calibration", "leds"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["delaycontrol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

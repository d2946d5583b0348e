[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "signlights"
version = "0.1.0"
description = "Pixel buffers, lighting styles, push-button handling and a status display for addressable LED signs"
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "neopixel", "sign", "lighting", "pixel-buffer", "seven-segment"]
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
    "Topic :: Home Automation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["signlights"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

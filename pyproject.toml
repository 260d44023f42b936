[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memory_corridor"
version = "0.1.0"
description = "A photo-memory album with a side-scrolling gallery model, yearly reports and a desktop pet model"
requires-python = ">=3.10"
dependencies = []
keywords = ["photo", "album", "memories", "gallery", "yearly report"]
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
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
memory-corridor = "memory_corridor.app:main"

[tool.hatch.build.targets.wheel]
packages = ["memory_corridor"]

[tool.pytest.ini_options]
addopts = "-ra"

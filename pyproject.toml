[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "npctickmetrics"
version = "0.1.0"
description = "Thread-safe NPC simulation tick metrics with Prometheus text exposition"
requires-python = ">=3.10"
dependencies = []
keywords = ["metrics", "prometheus", "npc", "simulation", "monitoring"]
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
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["npctickmetrics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

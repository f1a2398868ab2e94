[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emberframe"
version = "0.1.0"
description = "Small application-framework core: event bus, input state, tracked dynamic arrays and levelled logging."
requires-python = ">=3.10"
dependencies = []
keywords = ["events", "input", "event-bus", "framework", "logging", "memory-tracking"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["emberframe"]

[tool.pytest.ini_options]
addopts = "-ra"

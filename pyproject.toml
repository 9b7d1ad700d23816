[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vista"
version = "0.1.0"
description = "A small read-only JSON API for browsing container registries and their images"
requires-python = ">=3.10"
dependencies = []
keywords = ["container", "registry", "api", "http", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vista = "vista.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vista"]

[tool.pytest.ini_options]
addopts = "-ra"

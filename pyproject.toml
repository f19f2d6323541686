[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkresolve"
version = "0.18.1"
description = "Resolve links found in documents into absolute URLs and check URL fragments against their target documents"
requires-python = ">=3.10"
dependencies = []
keywords = ["link", "link-checker", "url", "file-url", "fragment", "anchor"]
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
    "Topic :: Internet :: WWW/HTTP :: Site Management :: Link Checking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linkresolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filestore"
version = "1.0.0"
description = "HTTP service for managing directories and files inside a local storage root"
requires-python = ">=3.10"
keywords = ["files", "storage", "http", "flask", "upload", "directories"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
filestore = "filestore.app:main"

[tool.hatch.build.targets.wheel]
packages = ["filestore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

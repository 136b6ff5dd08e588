[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csvutility"
version = "0.1.0"
description = "A small HTTP service that echoes, inverts, flattens, sums and multiplies square integer CSV matrices"
requires-python = ">=3.10"
keywords = ["csv", "matrix", "http", "wsgi", "werkzeug"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]
dependencies = [
    "werkzeug",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
csvserver = "csvutility.app:main"

[tool.hatch.build.targets.wheel]
packages = ["csvutility"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookshelf-api"
version = "0.1.0"
description = "A small JSON HTTP API for managing a library of books stored in MongoDB"
requires-python = ">=3.10"
keywords = ["books", "library", "rest", "api", "mongodb", "flask"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "flask>=2.2",
    "pymongo>=4.0",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
bookshelf-api = "bookshelf_api.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bookshelf_api"]

[tool.pytest.ini_options]
addopts = "-ra"

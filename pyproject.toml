[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drills"
version = "0.1.0"
description = "Small algorithm drills, worked exercises and tiny in-memory JSON web services"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = [
    "algorithms",
    "exercises",
    "strings",
    "sorting",
    "hashing",
    "rest",
    "flask",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: Flask",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
drills-events = "drills.events_api:main"
drills-users = "drills.users_api:main"
drills-products = "drills.products_api:main"

[tool.hatch.build.targets.wheel]
packages = ["drills"]

[tool.hatch.build.targets.sdist]
include = [
    "drills",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sampleworks"
version = "0.1.0"
description = "Small worked examples: text and number helpers, shapes, an in-memory user API, an append-only record log, a URL checker, form validation and a Pac-Man game model"
requires-python = ">=3.10"
keywords = ["examples", "education", "flask", "rest", "pacman", "log", "url-checker"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: Flask",
    "Topic :: Education",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sampleworks-shapes = "sampleworks.shapes:main"
sampleworks-users = "sampleworks.userapi:main"
sampleworks-proglog = "sampleworks.proglog:main"
sampleworks-urlcheck = "sampleworks.urlcheck:main"

[tool.hatch.build.targets.wheel]
packages = ["sampleworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

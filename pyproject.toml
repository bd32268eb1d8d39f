[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maajise"
version = "2.0.0"
description = "Project scaffolding library: language templates, Git and Beads setup, project status and validation"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["scaffolding", "project", "template", "git", "generator"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["maajise"]

[tool.pytest.ini_options]
addopts = "-ra"

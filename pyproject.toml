[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ccyaml"
version = "0.1.0"
description = "Data model, value parsers and Docker Hub lookups for CircleCI YAML configuration tooling"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["circleci", "yaml", "configuration", "docker", "orbs", "diagnostics"]
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
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
ccyaml-dockerhub = "ccyaml.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ccyaml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

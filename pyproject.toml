[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oxtools"
version = "0.1.0"
description = "Development workflow plugins: builders, testers, fixers, initializers and migration generators for Go web applications"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["migrations", "fizz", "build", "scaffolding", "plugins", "development"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["oxtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

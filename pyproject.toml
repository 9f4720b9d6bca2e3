[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptbench"
version = "0.1.0"
description = "Benchmark of sequential versus threaded file copy, cipher and SHA-256 hashing jobs"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "sha256", "caesar", "threads", "files"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cryptbench = "cryptbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "syslab"
version = "0.1.0"
description = "Systems programming tools: a Unix V6 disk image reader, a process ring, a pipeline shell and a typed string list"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "unix-v6",
    "filesystem",
    "disk-image",
    "inode",
    "sha1",
    "shell",
    "pipes",
    "multiprocessing",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Education",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
diskimageaccess = "syslab.diskimageaccess:main"
syslab-stringdemo = "syslab.stringdemo:main"
syslab-ring = "syslab.ring:main"
syslab-shell = "syslab.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["syslab"]

[tool.hatch.build.targets.sdist]
include = ["syslab", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minixmkfs"
version = "0.1.0"
description = "Create an empty Minix V1 (30-character names) filesystem on a partition or image file"
requires-python = ">=3.10"
dependencies = []
keywords = ["minix", "filesystem", "mkfs", "disk image"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mkfs-minix = "minixmkfs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minixmkfs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mostools"
version = "0.1.0"
description = "Host-side tools for a small 32-bit teaching kernel: ELF section lister, binary-to-C converter, test image writer and kernel layout helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["elf", "readelf", "bintoc", "kernel", "operating-system", "build-tools"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mos-readelf = "mostools.readelf:main"
mos-bintoc = "mostools.bintoc:main"
mos-allone = "mostools.allone:main"

[tool.hatch.build.targets.wheel]
packages = ["mostools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdfcore"
version = "0.1.0"
description = "Building blocks for reading PDF files: stream filters, color spaces, RC4/AES primitives and lexical helpers"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
    "pillow",
]
keywords = ["pdf", "filters", "flate", "lzw", "ascii85", "ccitt", "colorspace", "rc4", "aes"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pdfcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lockcipher"
version = "0.1.0"
description = "Obfuscating stored passwords with XOR, XTEA and Salsa20 over base64 text"
requires-python = ">=3.10"
dependencies = []
keywords = ["xtea", "salsa20", "xor", "base64", "password", "obfuscation"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["lockcipher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"

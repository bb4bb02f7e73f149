[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boundcrypt"
version = "1.0.0"
description = "Encrypt and decrypt files using another file's contents as the key."
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["encryption", "aes-gcm", "hkdf", "file-encryption", "key-file"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
boundcrypt = "boundcrypt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["boundcrypt"]

[tool.pytest.ini_options]
addopts = "-ra"

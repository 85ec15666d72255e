[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vitaftp"
version = "0.1.0"
description = "Support code for a handheld FTP client: INI files, SHA-1, param.sfo lookup, UI colour styles, translations and HTTP downloads"
requires-python = ">=3.10"
dependencies = []
keywords = ["ftp", "ini", "sha1", "sfo", "param.sfo", "translation", "style", "download"]
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
    "Topic :: Internet :: File Transfer Protocol (FTP)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vitaftp"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

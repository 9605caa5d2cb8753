[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "os_info"
version = "3.10.0"
description = "Detect the operating system type and version."
requires-python = ">=3.10"
dependencies = []
keywords = ["os", "os_type", "os_version", "os_info", "bitness", "architecture"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
os_info = "os_info.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["os_info"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sshkvm"
version = "0.1.0"
description = "Forced-command SSH front end that identifies the caller and reports the virtual machine action requested"
requires-python = ">=3.10"
dependencies = []
keywords = ["ssh", "authorized_keys", "virtual-machine", "forced-command", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sshkvm = "sshkvm.dispatcher:main"

[tool.hatch.build.targets.wheel]
packages = ["sshkvm"]

[tool.pytest.ini_options]
addopts = "-ra"

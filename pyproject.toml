[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rokit"
version = "1.0.0"
description = "Toolchain manager core: platform detection, artifact selection and extraction, and auth token storage for Roblox project tools"
requires-python = ">=3.10"
keywords = ["toolchain", "roblox", "artifacts", "platform-detection", "executables"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Build Tools",
]
dependencies = [
    "semver",
    "tomlkit",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

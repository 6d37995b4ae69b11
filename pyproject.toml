[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ulvm"
version = "0.1.0"
description = "Version manager for Node.js releases and Rust toolchains"
requires-python = ">=3.11"
keywords = ["version-manager", "node", "nodejs", "rust", "rustup", "toolchain", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Topic :: Utilities",
]
dependencies = [
    "requests>=2.31",
    "termcolor>=2.3",
    "tomli-w>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "responses>=0.24",
]

[project.scripts]
ulvm = "ulvm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ulvm"]

[tool.hatch.build.targets.sdist]
include = ["ulvm", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
ignore_missing_imports = true

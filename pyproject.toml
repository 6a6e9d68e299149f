[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "authkeep"
version = "0.1.0"
description = "Building blocks for web authentication: one-time passwords, two-factor recovery codes, form payload checks, module registration and OAuth2 user details"
requires-python = ">=3.10"
keywords = ["authentication", "otp", "two-factor", "oauth2", "recovery codes", "bcrypt"]
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
    "Topic :: Security",
    "Topic :: Internet :: WWW/HTTP :: Session",
]
dependencies = [
    "bcrypt",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["authkeep"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

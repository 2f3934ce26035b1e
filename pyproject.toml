[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "standx"
version = "0.1.0"
description = "Client for the StandX perpetuals REST API, with signed order requests and Ethereum address helpers"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
    "requests",
]
keywords = ["standx", "perpetuals", "trading", "api-client", "ethereum", "eip-55", "keccak", "base58"]
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
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["standx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

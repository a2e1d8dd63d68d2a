[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amqpwire"
version = "4.1.4"
description = "AMQP 0-9-1 wire-format frames, field encoding and transport buffers"
requires-python = ">=3.10"
dependencies = []
keywords = ["amqp", "amqp-0-9-1", "rabbitmq", "protocol", "frames", "messaging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["amqpwire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

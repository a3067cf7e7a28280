[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blogkit"
version = "0.1.0"
description = "Small, self-contained building blocks: base64, multi-hashing, Bloom filters, case-insensitive strings, a pluggable binary serializer, memory pools, synchronisation primitives, queues, thread pools and observable properties."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "base64",
    "bloom-filter",
    "hashing",
    "mersenne-twister",
    "serialization",
    "memory-pool",
    "thread-pool",
    "semaphore",
    "queue",
    "case-insensitive",
    "observable",
    "design-patterns",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blogkit-base64 = "blogkit.base64:main"

[tool.hatch.build.targets.wheel]
packages = ["blogkit"]

[tool.hatch.build.targets.sdist]
include = ["blogkit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

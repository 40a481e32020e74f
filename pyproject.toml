[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "palletkit"
version = "0.1.0"
description = "In-memory runtime modules with signed origins, events, dispatch weights and weight-to-fee conversion"
requires-python = ">=3.10"
dependencies = []
keywords = ["runtime", "pallet", "storage", "events", "weights", "fees"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["palletkit"]

[tool.pytest.ini_options]
addopts = "-ra"

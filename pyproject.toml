[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wasmkit"
version = "0.1.0"
description = "Building blocks for holding parts of WebAssembly modules in memory and writing them in the binary format"
requires-python = ">=3.10"
dependencies = []
keywords = ["webassembly", "wasm", "binary", "encoder", "leb128"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["wasmkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

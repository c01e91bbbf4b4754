[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kernui"
version = "0.1.0"
description = "Multi-part QR assembly, mnemonic QR decoding and display-independent UI component models for a signing device"
requires-python = ">=3.10"
dependencies = []
keywords = ["qr", "seedqr", "bip39", "mnemonic", "pmofn", "ui", "signing-device"]
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
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kernui"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

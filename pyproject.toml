[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scetrace"
version = "1.0.0"
description = "Decode SIM card APDU traffic captured by a SIMtrace sniffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["sim", "apdu", "iso7816", "simtrace", "stk", "cat", "smartcard", "trace"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Telephony",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scetrace = "scetrace.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["scetrace"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

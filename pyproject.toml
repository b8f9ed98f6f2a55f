[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rfdoc"
version = "0.1.0"
description = "Read and edit Request for Discussion documents written in AsciiDoc or Markdown"
requires-python = ">=3.10"
dependencies = []
keywords = ["rfd", "asciidoc", "markdown", "documents", "templates"]
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
    "Topic :: Text Processing :: Markup",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rfdoc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

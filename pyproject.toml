[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jadio"
version = "0.1.0"
description = "Backend logic for a small code editor: projects, files, editing, highlighting, search, scripts, servers and a code assistant"
requires-python = ">=3.10"
dependencies = []
keywords = ["ide", "editor", "syntax-highlighting", "code-assistant", "projects"]
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
    "Topic :: Text Editors :: Integrated Development Environments (IDE)",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jadio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

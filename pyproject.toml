[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jogo"
version = "0.1.0"
description = "A small multiplayer terminal maze game with an XML-RPC server and curses clients"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "multiplayer", "mud", "curses", "xml-rpc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Multi-User Dungeons (MUD)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jogo-server = "jogo.server:main"
jogo-client = "jogo.client:main"

[tool.hatch.build.targets.wheel]
packages = ["jogo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

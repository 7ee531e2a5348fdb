[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smart-chessboard"
version = "0.1.0"
description = "Chess board model with simple move validation that forwards accepted moves to a TCP server"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "chessboard", "fen", "board-game", "tcp"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
smart-chessboard = "smart_chessboard.main:main"

[tool.hatch.build.targets.wheel]
packages = ["smart_chessboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

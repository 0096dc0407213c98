[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "songkit"
version = "0.1.0"
description = "PCM sample arithmetic, WAV headers, 4x4 matrices, message queues and texture-coordinate helpers for audio/video tooling"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "pcm", "wav", "mixing", "matrix", "message-queue", "video", "texture"]
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
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Multimedia :: Video",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["songkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crema"
version = "0.1.0"
description = "Photo browser core: EXIF summaries, thumbnail caching, date navigation, histograms, layout state and export"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["photo", "exif", "thumbnails", "histogram", "browser", "viewer"]
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
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pillow",
]

[tool.hatch.build.targets.wheel]
packages = ["crema"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "rsskit"
version = "0.1.0"
description = "Data classes, extension readers and XML element builders for RSS feed parts and their namespace extensions"
requires-python = ">=3.10"
dependencies = []
keywords = ["rss", "feed", "syndication", "podcast", "itunes", "dublin-core", "atom", "xml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: XML",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["rsskit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pybuttonui"
version = "0.1.0"
description = "A small pygame widget kit with stateful, styleable buttons"
requires-python = ">=3.10"
keywords = ["pygame", "gui", "button", "widget"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Software Development :: User Interfaces",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pybuttonui-demo = "pybuttonui.client:main"

[tool.hatch.build.targets.wheel]
packages = ["pybuttonui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

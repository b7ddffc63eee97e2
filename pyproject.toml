[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kertical"
version = "0.1.0"
description = "Resource models for ExternalProxy and PortForwarding, with helpers for matching webhook configurations to the services and pods that serve them"
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "admission", "webhook", "ingress", "proxy", "port-forwarding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kertical"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

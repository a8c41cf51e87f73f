[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "l2utils"
version = "0.1.0"
description = "Small command-line utilities (sort, grep, cut, wget, telnet, shell, NTP time, calendar server) and design-pattern examples"
requires-python = ">=3.10"
keywords = [
    "sort",
    "grep",
    "cut",
    "wget",
    "telnet",
    "shell",
    "ntp",
    "calendar",
    "design-patterns",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml",
    "requests",
    "beautifulsoup4",
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
l2-visitor = "l2utils.visitor:main"
l2-ntptime = "l2utils.ntptime:main"
l2-or = "l2utils.orchannel:main"
l2-sort = "l2utils.sorter:main"
l2-grep = "l2utils.grep:main"
l2-cut = "l2utils.cut:main"
l2-shell = "l2utils.shell:main"
l2-wget = "l2utils.wget:main"
l2-telnet = "l2utils.telnet:main"
l2-calendar = "l2utils.server:main"

[tool.hatch.build.targets.wheel]
packages = ["l2utils"]

[tool.hatch.build.targets.sdist]
include = ["l2utils", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

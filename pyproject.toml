[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kubecf"
version = "0.1.0"
description = "Switch the active kubeconfig by pointing a symlink at one of several kubeconfig files"
requires-python = ">=3.10"
keywords = ["kubernetes", "kubectl", "kubeconfig", "symlink", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Utilities",
]
dependencies = [
    "prompt-toolkit>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
kubectl-cf = "kubecf.switcher:main"

[tool.hatch.build.targets.wheel]
packages = ["kubecf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

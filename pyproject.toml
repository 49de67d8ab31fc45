[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "optctl"
version = "0.1.0"
description = "Quadratic trajectory cost functions, evaluable Jacobians and labelled states for discrete-time optimal control"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["optimal control", "cost function", "trajectory optimization", "LQR", "numpy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["optctl"]

[tool.pytest.ini_options]
addopts = "-ra"

from setuptools import setup, find_packages

# Project metadata and dependencies live in pyproject.toml
setup(
    packages=find_packages(where="src"),
    package_dir={"": "src"},
)

#!/usr/bin/env python3
"""
Setup script for the dualdb package.
"""

import re

from setuptools import setup, find_packages

# Read version from package without importing it
with open("dualdb/__init__.py") as f:
    version = dict(re.findall(r"^(__version__|__author__) = \"([^\"]+)\"", f.read(), re.M))

# Read requirements
with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="dualdb",
    version=version["__version__"],
    author=version["__author__"],
    description="Environment-configured OLTP/OLAP MySQL connections with a generic CRUD client",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Database",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="mysql database crud oltp olap sqlalchemy",
)

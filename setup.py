#!/usr/bin/env python

from setuptools import setup


VERSION = "0.1a1"

setup(
    name="tagtree",
    version=VERSION,
    description=(
        "Parses documents in a line-oriented tag format to trees, edits and "
        "serializes them."
    ),
    license="AGPL-3.0-or-later",
    python_requires=">=3.10",
    packages=["_tagtree", "_tagtree.plugins", "tagtree"],
    install_requires=[],
    extras_require={
        "web-loader": ["httpx"],
        "tests": ["httpx", "pytest", "pytest-httpx"],
        "benchmarks": ["pytest", "pytest-benchmark"],
    },
)

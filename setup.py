#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="hostbind",
    version="0.1.0",
    description="Copy, clone and keyword-construction adapters for host value types",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "json5",
    ],
    extras_require={
        "dev": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "hostbind=hostbind.cli:main",
        ],
    },
)
